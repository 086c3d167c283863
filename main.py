# -*- coding: utf-8 -*-
"""
医战 - 命令行终端版
主程序入口

使用方法:
    python main.py                  # 菜单模式
    python main.py --auto --seed 7  # 直接观看一局自动对战

依赖:
    - Python 3.10+
    - rich
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys
import time
from typing import TYPE_CHECKING, List, Optional

from logging_config import setup_logging

from game.config import GameConfig, get_config
from game.diagnosis import FORMULA_POTENCY, SYMPTOMS, SixChannelGame
from game.engine import GameEngine
from game.enums import PlayerRole, School
from game.exceptions import ConfigurationError
from game.player import Player
from i18n import set_locale, t as _t
from ui.rich_ui import DOCTOR_SCHOOLS, RichTerminalUI

if TYPE_CHECKING:
    from ui.protocol import GameUI

logger = logging.getLogger(__name__)


class YizhanGame:
    """
    医战游戏主类
    负责菜单、对局的创建与主循环
    """

    def __init__(self, ui: Optional[GameUI] = None,
                 config: Optional[GameConfig] = None,
                 auto: bool = False,
                 school: Optional[School] = None):
        """
        初始化游戏

        Args:
            ui: 实现 GameUI 协议的界面，默认 RichTerminalUI
            config: 游戏配置
            auto: 自动推进回合（不等待回车）
            school: 医生流派，为 None 时开局前询问
        """
        self.ui = ui or RichTerminalUI()
        self.config = config or get_config()
        self.auto = auto
        self.school = school
        self.engine: Optional[GameEngine] = None
        self.is_running = True

    def run(self) -> None:
        """运行游戏主循环"""
        while self.is_running:
            choice = self.ui.show_main_menu()

            if choice == 1:
                self.start_battle()
            elif choice == 2:
                self.play_diagnosis()
            elif choice == 3:
                self.ui.show_rules()
            elif choice == 4:
                self.is_running = False
                self.ui.show_message(_t("main.farewell"))

    def create_engine(self, school: School) -> GameEngine:
        """按配置创建双方与引擎"""
        doctor = Player(name=_t("main.doctor_name"), role=PlayerRole.DOCTOR,
                        school=school, max_health=self.config.max_health)
        disease = Player(name=_t("main.disease_name"), role=PlayerRole.DISEASE,
                         school=School.WARM_DISEASE, max_health=self.config.max_health)
        rng = random.Random(self.config.seed) if self.config.seed is not None else None
        return GameEngine(doctor, disease, rng=rng, config=self.config)

    def start_battle(self) -> GameEngine:
        """开始一局对战并运行至结束"""
        school = self.school or self.ui.show_school_menu()
        self.engine = self.create_engine(school)
        self.ui.set_engine(self.engine)
        self.engine.start_game()

        self._battle_loop()
        self.ui.show_game_over(self.engine)
        if not self.auto:
            self.ui.wait_for_continue()
        return self.engine

    def _battle_loop(self) -> None:
        engine = self.engine
        while not engine.game_over:
            self.ui.show_game_state(engine)
            if self.auto:
                if self.config.turn_delay > 0:
                    time.sleep(self.config.turn_delay)
            else:
                self.ui.wait_for_continue()
            engine.play_turn()

    def play_diagnosis(self) -> SixChannelGame:
        """六经辨证小游戏，选择 0 返回主菜单"""
        game = SixChannelGame()
        formulas = list(FORMULA_POTENCY)

        while not game.game_over:
            self.ui.show_diagnosis_state(game)
            symptom = self.ui.choose_symptom(SYMPTOMS)
            if symptom is None:
                return game
            game.diagnose(symptom)

            self.ui.show_diagnosis_state(game)
            formula = self.ui.choose_formula(formulas)
            if formula is None:
                return game
            self.ui.show_treatment(game.treat(formula))

        self.ui.show_diagnosis_state(game)
        self.ui.wait_for_continue()
        return game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yizhan", description=_t("main.description"))
    parser.add_argument("--seed", type=int, default=None, help=_t("main.arg.seed"))
    parser.add_argument("--auto", action="store_true", help=_t("main.arg.auto"))
    parser.add_argument("--delay", type=float, default=None, help=_t("main.arg.delay"))
    parser.add_argument("--school", choices=[s.value for s in DOCTOR_SCHOOLS],
                        default=None, help=_t("main.arg.school"))
    parser.add_argument("--lang", choices=["zh_CN", "en_US"], default=None,
                        help=_t("main.arg.lang"))
    parser.add_argument("--log-level", default=None, help=_t("main.arg.log_level"))
    parser.add_argument("--debug", action="store_true", help=_t("main.arg.debug"))
    return parser


def config_from_args(args: argparse.Namespace, base: Optional[GameConfig] = None) -> GameConfig:
    """命令行参数覆盖环境变量配置

    Raises:
        ConfigurationError: 覆盖后的配置不合法
    """
    config = base or get_config()
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.delay is not None:
        overrides["turn_delay"] = args.delay
    if args.lang is not None:
        overrides["locale"] = args.lang
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    if args.debug:
        overrides["debug_mode"] = True
        overrides["log_level"] = "DEBUG"
    if overrides:
        config = dataclasses.replace(config, **overrides)

    errors = config.validate()
    if errors:
        raise ConfigurationError("; ".join(errors))
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """程序入口，返回退出码"""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        setup_logging(config)
        set_locale(config.locale)
        logger.info("Starting yizhan | seed=%s auto=%s school=%s",
                    config.seed, args.auto, args.school)

        school = School(args.school) if args.school else None
        if args.auto and school is None:
            school = School.CLASSICAL_FORMULA
        game = YizhanGame(config=config, auto=args.auto, school=school)
        if args.auto:
            game.start_battle()
        else:
            game.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        print(_t("main.interrupted"))
        return 0
    except Exception as e:
        logger.exception("Unhandled exception")
        print(_t("main.error", error=e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
