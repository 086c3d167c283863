"""对局生命周期有限状态机

提供引擎状态的合法转换验证：NOT_STARTED → IN_PROGRESS → FINISHED。
已结束的对局是终态，不能重新开局；同一引擎也不能开局两次。
"""

from __future__ import annotations

import logging

from .enums import GameState
from .exceptions import InvalidReplayError

logger = logging.getLogger(__name__)

# 合法的状态转换表
# key: 当前状态, value: 允许转换到的目标状态集合
VALID_TRANSITIONS: dict[GameState, set[GameState]] = {
    GameState.NOT_STARTED: {GameState.IN_PROGRESS},
    GameState.IN_PROGRESS: {GameState.FINISHED},
    GameState.FINISHED: set(),  # 终态
}


class InvalidStateTransition(InvalidReplayError):
    """非法状态转换异常

    当尝试进行不合法的状态转换时抛出，
    例如对进行中的对局再次开局。
    """

    def __init__(
        self,
        current_state: GameState,
        target_state: GameState,
    ):
        message = f"Invalid state transition: {current_state.name} → {target_state.name}"
        super().__init__(
            message=message,
            current_state=current_state.value,
            expected_state=target_state.value,
        )
        self.from_state = current_state
        self.to_state = target_state


class GameStateFSM:
    """对局生命周期有限状态机

    使用方式::

        fsm = GameStateFSM()
        fsm.transition(GameState.IN_PROGRESS)  # OK
        fsm.transition(GameState.IN_PROGRESS)  # 抛出 InvalidStateTransition
    """

    def __init__(self) -> None:
        self._state: GameState = GameState.NOT_STARTED

    @property
    def current(self) -> GameState:
        """当前状态"""
        return self._state

    def transition(self, target: GameState) -> None:
        """转换到目标状态

        Args:
            target: 目标状态

        Raises:
            InvalidStateTransition: 如果转换不合法
        """
        valid = VALID_TRANSITIONS.get(self._state, set())
        if target not in valid:
            raise InvalidStateTransition(self._state, target)
        logger.debug("State transition: %s → %s", self._state.name, target.name)
        self._state = target

    def can_transition(self, target: GameState) -> bool:
        """检查是否可以转换到目标状态"""
        return target in VALID_TRANSITIONS.get(self._state, set())

    @property
    def is_started(self) -> bool:
        return self._state != GameState.NOT_STARTED

    @property
    def is_finished(self) -> bool:
        return self._state == GameState.FINISHED
