"""Tests for game.win_checker — termination priority and messages."""

import random

import pytest

from game.enums import GameResult, PlayerRole, School
from game.engine import GameEngine
from game.player import Player
from game.win_checker import WinConditionChecker, evaluate_termination, result_message


class TestEvaluateTermination:
    def test_both_alive_in_time(self):
        info = evaluate_termination(50, 50, 5)
        assert info.is_over is False
        assert info.result == GameResult.PENDING

    def test_doctor_zero_loses(self):
        info = evaluate_termination(0, 40, 3)
        assert info.is_over is True
        assert info.result == GameResult.LOSE
        assert info.honor_title == "更强大的病邪"

    def test_disease_zero_wins(self):
        info = evaluate_termination(40, 0, 3)
        assert info.result == GameResult.WIN
        assert info.honor_title == "悬壶济世"

    def test_double_zero_is_loss(self):
        assert evaluate_termination(0, 0, 1).result == GameResult.LOSE

    def test_health_beats_turn_limit(self):
        assert evaluate_termination(30, 0, 11).result == GameResult.WIN

    @pytest.mark.parametrize("turn, over", [(10, False), (11, True), (12, True)])
    def test_turn_limit_boundary(self, turn, over):
        info = evaluate_termination(50, 50, turn)
        assert info.is_over is over
        if over:
            assert info.result == GameResult.DRAW
            assert info.honor_title is None

    def test_custom_max_turns(self):
        assert evaluate_termination(50, 50, 4, max_turns=3).result == GameResult.DRAW


class TestWinConditionChecker:
    def test_reads_engine_state(self):
        doctor = Player(name="张仲景", role=PlayerRole.DOCTOR, school=School.CLASSICAL_FORMULA)
        disease = Player(name="温邪", role=PlayerRole.DISEASE, school=School.WARM_DISEASE)
        engine = GameEngine(doctor, disease, random.Random(0))
        checker = WinConditionChecker(engine)

        assert checker.is_game_over() is False
        disease.take_damage(100)
        assert checker.check_game_over().result == GameResult.WIN


class TestResultMessage:
    def test_messages(self):
        assert result_message(GameResult.WIN) != result_message(GameResult.LOSE)
        assert result_message(GameResult.PENDING) == "对局进行中"
