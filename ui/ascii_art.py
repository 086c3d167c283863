# -*- coding: utf-8 -*-
"""
ASCII艺术模块
提供游戏中的标题、图标和结算画面
"""

from typing import List


class ASCIIArt:
    """ASCII艺术类，提供各种装饰性文字和图形"""

    # 游戏标题
    TITLE_SIMPLE = """
╔══════════════════════════════════════════════════════════════╗
║                    【 医  战 】                                ║
║                 医生 vs 疾病 · 命令行终端版                    ║
╚══════════════════════════════════════════════════════════════╝
"""

    # 角色图标
    ROLE_ICONS = {
        "doctor": "【医】",
        "disease": "【邪】",
    }

    # 卡牌种类图标
    CARD_TYPE_ICONS = {
        "herb": "🌿",
        "acupoint": "📍",
        "symptom": "🦠",
        "formula": "⚗",
        "needle_method": "🪡",
        "syndrome": "☣",
    }

    # 结算画面
    VICTORY = """
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║                  ✚   妙 手 回 春 ， 药 到 病 除   ✚            ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
"""

    DEFEAT = """
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║                  ✖   正 不 胜 邪 ， 病 入 膏 肓   ✖            ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
"""

    DRAW = """
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║                  ☯   正 邪 相 持 ， 胜 负 未 分   ☯            ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
"""

    @classmethod
    def get_result_banner(cls, result: str) -> str:
        """根据对局结果（win/lose/draw）获取结算画面"""
        banners = {
            "win": cls.VICTORY,
            "lose": cls.DEFEAT,
            "draw": cls.DRAW,
        }
        return banners.get(result, cls.DRAW)

    @classmethod
    def get_card_icon(cls, card_type: str) -> str:
        return cls.CARD_TYPE_ICONS.get(card_type, "?")

    @classmethod
    def get_rules_lines(cls) -> List[str]:
        """获取规则说明（中文），供规则面板使用"""
        return [
            "【对战】医生与疾病轮流行动，最多 10 回合。",
            "  医生每回合随机选择：单味药、合成方剂或针刺穴位。",
            "  单味药：回复 药力×流派加成 点正气，并造成其一半的伤害。",
            "  方剂：取前两味药材合成，疗效=药力之和×2×流派加成，同时回复与伤害。",
            "  针刺：造成 针力×2 点伤害，不受流派影响。",
            "  疾病随机发动症状，温病派的“病”类症状伤害 ×1.5。",
            "  医生正气归零判负；疾病邪气归零判胜；超过 10 回合判平局。",
            "",
            "【六经辨证】先按症状辨出病位，再选方治疗。",
            "  方证对应则病情减轻，否则加重；每两回合病邪传入下一经。",
            "  病情降至 0 即治愈；达到 100 或超过 15 回合即失败。",
        ]
