"""GameUI 协议 — 接口隔离拆分

遵循接口隔离原则 (ISP)，将 UI 拆分为三个职责明确的子协议：
  - GameDisplay : 纯展示输出（fire-and-forget）
  - GameInput   : 交互输入（阻塞获取玩家选择）
  - GameNotify  : 生命周期通知（引擎绑定）

GameUI 作为组合协议，继承全部三个子协议。
RichTerminalUI 等实现类基于结构子类型化 (structural subtyping)
自动满足协议要求，无需显式继承。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from game.diagnosis import SixChannelGame, TreatmentOutcome
    from game.engine import GameEngine
    from game.enums import School


# ====================================================================== #
#  子协议 1: GameDisplay：纯展示                                         #
# ====================================================================== #


class GameDisplay(Protocol):
    """纯展示协议 — 只负责向用户输出信息，无需返回有意义的值。"""

    def show_title(self) -> None: ...
    def show_rules(self) -> None: ...
    def show_game_state(self, engine: GameEngine) -> None: ...
    def show_log(self, message: str) -> None: ...
    def show_message(self, message: str) -> None: ...
    def show_game_over(self, engine: GameEngine) -> None: ...
    def show_diagnosis_state(self, game: SixChannelGame) -> None: ...
    def show_treatment(self, outcome: TreatmentOutcome) -> None: ...
    def clear_screen(self) -> None: ...


# ====================================================================== #
#  子协议 2: GameInput：交互输入                                          #
# ====================================================================== #


class GameInput(Protocol):
    """交互输入协议 — 阻塞等待并返回玩家选择。"""

    def show_main_menu(self) -> int: ...
    def show_school_menu(self) -> School: ...
    def choose_symptom(self, symptoms: list[str]) -> str | None: ...
    def choose_formula(self, formulas: list[str]) -> str | None: ...
    def wait_for_continue(self, message: str | None = None) -> None: ...


# ====================================================================== #
#  子协议 3: GameNotify：生命周期通知                                      #
# ====================================================================== #


class GameNotify(Protocol):
    """生命周期通知协议 — 绑定引擎并订阅其事件。"""

    def set_engine(self, engine: GameEngine) -> None: ...


# ====================================================================== #
#  组合协议: GameUI                                                        #
# ====================================================================== #


class GameUI(GameDisplay, GameInput, GameNotify, Protocol):
    """完整 UI 协议 — 组合 Display + Input + Notify。"""

    ...
