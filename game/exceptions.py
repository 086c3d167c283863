"""医战异常模块
定义卡牌构造、对局生命周期与数据加载中的各类异常，提供明确的错误类型和信息
"""

from i18n import t as _t


class GameError(Exception):
    """游戏异常基类

    所有游戏相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str, details: dict | None = None):
        """初始化游戏异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 卡牌相关异常 ====================


class InvalidCardError(GameError):
    """基础牌构造异常

    药力、针力或症状伤害不是正数时抛出
    """

    def __init__(self, card_name: str, field_name: str, value: object):
        message = _t("exc.invalid_card", name=card_name, field=field_name, value=value)
        super().__init__(message, {"card_name": card_name, "field": field_name, "value": value})
        self.card_name = card_name
        self.field_name = field_name
        self.value = value


class InvalidCompositionError(GameError):
    """组合牌构造异常

    方剂、针法、综合征的组成为空或混入了错误种类的牌时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        card_name: str | None = None,
        component_count: int = 0,
    ):
        if message is None:
            message = _t("exc.invalid_composition")
        details = {"component_count": component_count}
        if card_name:
            details["card_name"] = card_name
        super().__init__(message, details)
        self.card_name = card_name
        self.component_count = component_count


# ==================== 游戏状态相关异常 ====================


class GameStateError(GameError):
    """游戏状态异常

    当游戏处于不允许某操作的状态时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        current_state: str | None = None,
        expected_state: str | None = None,
    ):
        if message is None:
            message = _t("exc.game_state")
        details = {}
        if current_state:
            details["current_state"] = current_state
        if expected_state:
            details["expected_state"] = expected_state
        super().__init__(message, details)
        self.current_state = current_state
        self.expected_state = expected_state


class GameNotStartedError(GameStateError):
    """游戏未开始异常

    尚未调用 start_game() 就推进回合时抛出
    """

    def __init__(self, message: str | None = None):
        if message is None:
            message = _t("exc.game_not_started")
        super().__init__(message, current_state="not_started", expected_state="in_progress")


class GameAlreadyFinishedError(GameStateError):
    """游戏已结束异常

    当游戏已结束但尝试继续操作时抛出
    """

    def __init__(self, message: str | None = None):
        if message is None:
            message = _t("exc.game_finished")
        super().__init__(message, current_state="finished")


class InvalidReplayError(GameStateError):
    """重复操作异常

    对同一引擎重复执行只允许执行一次的操作时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        current_state: str | None = None,
        expected_state: str | None = None,
    ):
        if message is None:
            message = _t("exc.invalid_replay")
        super().__init__(message, current_state, expected_state)


class GameAlreadyStartedError(InvalidReplayError):
    """重复开局异常

    对同一引擎第二次调用 start_game() 时抛出
    """

    def __init__(self, message: str | None = None, current_state: str | None = None):
        if message is None:
            message = _t("exc.game_already_started")
        super().__init__(message, current_state=current_state, expected_state="not_started")


# ==================== 配置/数据相关异常 ====================


class ConfigurationError(GameError):
    """配置错误异常

    当游戏配置有问题时抛出
    """

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = _t("exc.config_error")
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class DataLoadError(GameError):
    """数据加载异常

    当加载起始牌组数据文件失败时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.data_load_error")
        details = {}
        if file_path:
            details["file_path"] = file_path
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.file_path = file_path
        self.reason = reason


# ==================== 工具函数 ====================


def raise_if_game_not_started(game_state: str) -> None:
    """检查游戏是否已开始，未开始则抛出异常

    Args:
        game_state: 当前游戏状态

    Raises:
        GameNotStartedError: 如果游戏未开始
    """
    if game_state == "not_started":
        raise GameNotStartedError()
