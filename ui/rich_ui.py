# -*- coding: utf-8 -*-
"""
Rich TUI Module
Uses the 'rich' library to render the battle, the six-channel mini game and menus.
"""

from typing import Optional, List, TYPE_CHECKING

from rich.console import Console
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED, DOUBLE
from rich.align import Align

from game.card import CardType
from game.enums import GameResult, PlayerRole, School
from game.events import EventType, GameEvent
from game.win_checker import result_message
from i18n import t as _t
from ui.ascii_art import ASCIIArt
from ui.hp_bar import rich_hp_bar, render_hp_bar

if TYPE_CHECKING:
    from game.card import Card
    from game.diagnosis import SixChannelGame, TreatmentOutcome
    from game.engine import GameEngine
    from game.medical_case import MedicalCase
    from game.player import Player

# 医生可选流派（温病派为疾病专属）
DOCTOR_SCHOOLS = [School.CLASSICAL_FORMULA, School.GOLDEN_NEEDLE, School.EARTH_TONIFYING]

ROLE_COLORS = {
    PlayerRole.DOCTOR: "green",
    PlayerRole.DISEASE: "magenta",
}


class RichTerminalUI:
    """
    Rich TUI Class
    Spectator view of an automatic battle plus simple numbered menus.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)
        self.layout = Layout()
        self.engine: Optional['GameEngine'] = None
        self.log_messages: List[str] = []
        self.max_log_lines = 15

        self._init_layout()

    def _init_layout(self):
        """Initialize the layout tree"""
        self.layout.split(
            Layout(name="header", size=3),
            Layout(name="main", ratio=1),
        )

        self.layout["main"].split_row(
            Layout(name="left", ratio=3),
            Layout(name="right", ratio=2)
        )

        self.layout["left"].split(
            Layout(name="doctor", ratio=1),
            Layout(name="disease", ratio=1)
        )

        self.layout["right"].split(
            Layout(name="case", size=9),
            Layout(name="logs", ratio=1)
        )

    def set_engine(self, engine: 'GameEngine') -> None:
        """绑定引擎，订阅其日志事件"""
        if self.engine is not None:
            self.engine.event_bus.unsubscribe(EventType.LOG_MESSAGE, self._on_log_event)
        self.engine = engine
        self.log_messages.clear()
        engine.event_bus.subscribe(EventType.LOG_MESSAGE, self._on_log_event)

    def _on_log_event(self, event: GameEvent) -> None:
        self.show_log(event.message)

    def clear_screen(self) -> None:
        self.console.clear()

    # --- Menus ---

    def show_title(self) -> None:
        self.clear_screen()
        title_text = Text(ASCIIArt.TITLE_SIMPLE, style="bold green")
        self.console.print(Panel(title_text, box=DOUBLE, title=_t("ui.title")))

    def _ask_number(self, prompt: str, low: int, high: int) -> int:
        while True:
            choice = input(prompt).strip()
            if choice.isdigit() and low <= int(choice) <= high:
                return int(choice)
            self.console.print(f"[red]{_t('ui.invalid_choice')}[/red]")

    def show_main_menu(self) -> int:
        self.show_title()

        menu = Table(box=ROUNDED, show_header=False, show_edge=False)
        menu.add_column("Option", justify="right")
        menu.add_column("Description", justify="left")

        menu.add_row("[1]", _t("ui.menu.battle"))
        menu.add_row("[2]", _t("ui.menu.diagnosis"))
        menu.add_row("[3]", _t("ui.menu.rules"))
        menu.add_row("[4]", _t("ui.menu.quit"))

        self.console.print(Align.center(menu))
        self.console.print()
        return self._ask_number(_t("ui.menu.prompt", count=4), 1, 4)

    def show_school_menu(self) -> School:
        """选择医生流派"""
        self.console.print(Panel(_t("ui.school.title"), style="bold blue", box=ROUNDED))

        table = Table(box=ROUNDED, show_header=False)
        for i, school in enumerate(DOCTOR_SCHOOLS, 1):
            table.add_row(f"[{i}]", school.chinese_name, _t(f"ui.school.hint.{school.value}"))
        self.console.print(Align.center(table))

        index = self._ask_number(_t("ui.menu.prompt", count=len(DOCTOR_SCHOOLS)),
                                 1, len(DOCTOR_SCHOOLS))
        return DOCTOR_SCHOOLS[index - 1]

    def show_rules(self) -> None:
        self.clear_screen()
        rules = "\n".join(ASCIIArt.get_rules_lines())
        self.console.print(Panel(rules, title=_t("ui.menu.rules"), box=ROUNDED))
        self.wait_for_continue()

    def wait_for_continue(self, message: Optional[str] = None) -> None:
        input(message or _t("ui.wait_continue"))

    # --- Battle Rendering ---

    def _render_header(self, engine: 'GameEngine') -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left", ratio=1)
        grid.add_column(justify="right", ratio=1)

        turn_info = _t("ui.turn_header", turn=min(engine.turn, engine.config.max_turns),
                       max_turns=engine.config.max_turns)
        grid.add_row(turn_info, result_message(engine.result))
        return Panel(grid, style="white on blue")

    def _card_detail(self, card: 'Card') -> str:
        if card.card_type == CardType.HERB:
            return _t("ui.card.herb", property=card.property.chinese_name,
                      channel=card.channel, power=card.base_power)
        if card.card_type == CardType.ACUPOINT:
            return _t("ui.card.acupoint", meridian=card.meridian, power=card.base_power)
        if card.card_type == CardType.SYMPTOM:
            return _t("ui.card.symptom", type=card.type.chinese_name, damage=card.base_damage)
        return card.description

    def render_player(self, player: 'Player') -> Panel:
        """Render one side: status, health bar and hand"""
        color = ROLE_COLORS.get(player.role, "white")

        info = Table.grid(expand=True)
        name_txt = Text(ASCIIArt.ROLE_ICONS.get(player.role.value, ""), style=color)
        name_txt.append(f"{player.name} ", style=f"bold {color}")
        name_txt.append(f"[{player.role.chinese_name}·{player.school.chinese_name}]")
        name_txt.append(f"  {player.title}", style="italic")
        info.add_row(name_txt)
        info.add_row(rich_hp_bar(player.health, player.max_health))
        info.add_row(_t("ui.deck_count", count=player.deck_count))

        hand_table = Table(box=None, show_header=True, pad_edge=False, expand=True)
        hand_table.add_column("#", justify="right")
        hand_table.add_column(_t("ui.hand.name"))
        hand_table.add_column(_t("ui.hand.type"))
        hand_table.add_column(_t("ui.hand.detail"))
        for i, card in enumerate(player.hand, 1):
            icon = ASCIIArt.get_card_icon(card.card_type.value)
            hand_table.add_row(str(i), card.display_name,
                               f"{icon} {card.card_type.chinese_name}", self._card_detail(card))

        info.add_row(hand_table)
        return Panel(info, title=_t("ui.hand.title", name=player.name, count=player.hand_count),
                     border_style=color)

    def render_case(self, case: Optional['MedicalCase']) -> Panel:
        if case is None:
            return Panel(_t("ui.case.none"), title=_t("ui.case.title"))
        text = Text(case.description + "\n\n")
        text.append(_t("ui.case.tongue", tongue=case.tongue) + "\n")
        text.append(_t("ui.case.pulse", pulse=case.pulse) + "\n")
        text.append(_t("ui.case.symptoms", symptoms=case.symptom_summary))
        return Panel(text, title=_t("ui.case.title"), border_style="yellow")

    def _render_logs(self) -> Panel:
        log_text = Text()
        for msg in self.log_messages[-self.max_log_lines:]:
            log_text.append(msg + "\n")
        return Panel(log_text, title=_t("ui.log_title"), border_style="cyan")

    def show_game_state(self, engine: 'GameEngine') -> None:
        """Render the full battle interface"""
        self.console.clear()

        self.layout["header"].update(self._render_header(engine))
        self.layout["doctor"].update(self.render_player(engine.doctor))
        self.layout["disease"].update(self.render_player(engine.disease))
        self.layout["case"].update(self.render_case(engine.current_case))
        self.layout["logs"].update(self._render_logs())

        self.console.print(self.layout)

    def show_log(self, message: str) -> None:
        self.log_messages.append(message)

    def show_message(self, message: str) -> None:
        """直接输出一行提示（不进入对局日志）"""
        self.console.print(message)

    def build_summary(self, engine: 'GameEngine') -> Table:
        """Final statistics table"""
        summary = engine.summary()
        table = Table(box=ROUNDED, show_header=False, title=_t("ui.summary.title"))
        table.add_column("Item", style="bold")
        table.add_column("Value")
        table.add_row(_t("ui.summary.turns"), str(summary["turn"]))
        table.add_row(_t("ui.summary.result"), _t(f"result.{summary['result']}"))
        table.add_row(_t("ui.summary.doctor_health"),
                      render_hp_bar(engine.doctor.health, engine.doctor.max_health))
        table.add_row(_t("ui.summary.disease_health"),
                      render_hp_bar(engine.disease.health, engine.disease.max_health))
        table.add_row(_t("ui.summary.doctor_hand"), str(summary["doctor_hand"]))
        table.add_row(_t("ui.summary.disease_hand"), str(summary["disease_hand"]))
        return table

    def show_game_over(self, engine: 'GameEngine') -> None:
        self.clear_screen()
        result = engine.result
        style = {
            GameResult.WIN: "bold green",
            GameResult.LOSE: "bold red",
        }.get(result, "bold yellow")

        message = engine.game_over_info.message if engine.game_over_info else ""
        if engine.game_over_info and engine.game_over_info.honor_title:
            message += "\n" + _t("ui.honor_title", title=engine.game_over_info.honor_title)

        self.console.print(Panel(ASCIIArt.get_result_banner(result.value) + "\n" + message,
                                 style=style, box=DOUBLE))
        self.console.print(Align.center(self.build_summary(engine)))

    # --- Six-Channel Diagnosis ---

    def show_diagnosis_state(self, game: 'SixChannelGame') -> None:
        self.clear_screen()
        grid = Table.grid(expand=True)
        grid.add_column(justify="left", ratio=1)
        grid.add_column(justify="center", ratio=1)
        grid.add_column(justify="right", ratio=1)
        grid.add_row(
            _t("ui.diag.channel", channel=game.channel.chinese_name),
            render_hp_bar(game.severity, 100),
            _t("ui.diag.turn", turn=game.turn),
        )
        self.console.print(Panel(grid, title=_t("ui.menu.diagnosis"), style="white on blue"))

        log_text = Text()
        for msg in game.log[-self.max_log_lines:]:
            log_text.append(msg + "\n")
        self.console.print(Panel(log_text, title=_t("ui.log_title"), border_style="cyan"))

    def show_treatment(self, outcome: 'TreatmentOutcome') -> None:
        style = "green" if outcome.correct else "red"
        for message in outcome.messages:
            self.console.print(f"[{style}]{message}[/{style}]")

    def _choose_from(self, title: str, items: List[str]) -> Optional[str]:
        """Numbered selection, 0 to cancel"""
        self.console.print(f"\n[bold cyan]{title}[/bold cyan] ({_t('ui.cancel_hint')})")
        for i, item in enumerate(items, 1):
            self.console.print(f"  [{i}] {item}")
        index = self._ask_number(_t("ui.menu.prompt_cancel", count=len(items)), 0, len(items))
        if index == 0:
            return None
        return items[index - 1]

    def choose_symptom(self, symptoms: List[str]) -> Optional[str]:
        return self._choose_from(_t("ui.diag.choose_symptom"), symptoms)

    def choose_formula(self, formulas: List[str]) -> Optional[str]:
        return self._choose_from(_t("ui.diag.choose_formula"), formulas)
