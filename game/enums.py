"""医战枚举定义 — 角色、流派、药性、病邪类型、稀有度与对局状态

独立成模块以便 card / player / engine 之间互相引用时不产生循环导入。
"""

from enum import Enum


class PlayerRole(Enum):
    """对战角色"""

    DOCTOR = "doctor"  # 医生
    DISEASE = "disease"  # 疾病

    @property
    def chinese_name(self) -> str:
        names = {
            PlayerRole.DOCTOR: "医生",
            PlayerRole.DISEASE: "疾病",
        }
        return names.get(self, "?")

    @property
    def initial_title(self) -> str:
        """创建角色时的初始称号"""
        if self == PlayerRole.DOCTOR:
            return "药徒"
        return "初阶病邪"


class School(Enum):
    """流派"""

    CLASSICAL_FORMULA = "classical_formula"  # 经方派
    WARM_DISEASE = "warm_disease"  # 温病派（疾病专属）
    GOLDEN_NEEDLE = "golden_needle"  # 金针派
    EARTH_TONIFYING = "earth_tonifying"  # 补土派

    @property
    def chinese_name(self) -> str:
        names = {
            School.CLASSICAL_FORMULA: "经方派",
            School.WARM_DISEASE: "温病派",
            School.GOLDEN_NEEDLE: "金针派",
            School.EARTH_TONIFYING: "补土派",
        }
        return names.get(self, "?")

    @property
    def multiplier(self) -> int:
        """医生行动的流派加成倍率，未列出的流派为 1"""
        multipliers = {
            School.CLASSICAL_FORMULA: 2,
            School.GOLDEN_NEEDLE: 3,
            School.EARTH_TONIFYING: 2,
        }
        return multipliers.get(self, 1)


class HerbProperty(Enum):
    """药性（四气 + 平）"""

    COLD = "cold"
    COOL = "cool"
    NEUTRAL = "neutral"
    WARM = "warm"
    HOT = "hot"

    @property
    def chinese_name(self) -> str:
        names = {
            HerbProperty.COLD: "寒",
            HerbProperty.COOL: "凉",
            HerbProperty.NEUTRAL: "平",
            HerbProperty.WARM: "温",
            HerbProperty.HOT: "热",
        }
        return names.get(self, "?")


class DiseaseType(Enum):
    """症状类型"""

    ILLNESS = "illness"  # 病
    FATIGUE = "fatigue"  # 劳
    INJURY = "injury"  # 伤

    @property
    def chinese_name(self) -> str:
        names = {
            DiseaseType.ILLNESS: "病",
            DiseaseType.FATIGUE: "劳",
            DiseaseType.INJURY: "伤",
        }
        return names.get(self, "?")


class Rarity(Enum):
    """卡牌稀有度"""

    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class GameResult(Enum):
    """对局结果（以医生视角）"""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"
    PENDING = "pending"


class GameState(Enum):
    """引擎生命周期状态"""

    NOT_STARTED = "not_started"  # 未开始
    IN_PROGRESS = "in_progress"  # 进行中
    FINISHED = "finished"  # 已结束


class DoctorAction(Enum):
    """医生每回合可选的行动类型"""

    SINGLE_HERB = "single_herb"  # 单味药
    FORMULA = "formula"  # 合成方剂
    ACUPOINT = "acupoint"  # 针刺穴位
