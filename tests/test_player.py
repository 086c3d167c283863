"""
玩家系统单元测试
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.card import AcupointCard, CardType, HerbCard
from game.enums import HerbProperty, PlayerRole, School
from game.player import Player


def make_herb(power=10):
    return HerbCard(name="甘草", property=HerbProperty.NEUTRAL, channel="心肺脾胃", base_power=power)


def make_point(power=15):
    return AcupointCard(name="合谷", meridian="手阳明大肠经", base_power=power)


class TestPlayerInit:
    def test_doctor_defaults(self):
        p = Player(name="张仲景", role=PlayerRole.DOCTOR, school=School.CLASSICAL_FORMULA)
        assert p.health == 100
        assert p.max_health == 100
        assert p.level == 1
        assert p.title == "药徒"
        assert p.hand == [] and p.deck == []

    def test_disease_title(self):
        p = Player(name="温邪", role=PlayerRole.DISEASE, school=School.WARM_DISEASE)
        assert p.title == "初阶病邪"
        assert not p.is_doctor

    def test_string_enums_coerced(self):
        p = Player(name="x", role="doctor", school="golden_needle")
        assert p.role == PlayerRole.DOCTOR
        assert p.school == School.GOLDEN_NEEDLE

    def test_health_clamped(self):
        assert Player(name="x", role="doctor", school="golden_needle", health=150).health == 100
        assert Player(name="x", role="doctor", school="golden_needle", health=-3).health == 0


class TestPlayerCards:
    def setup_method(self):
        self.player = Player(name="张仲景", role=PlayerRole.DOCTOR, school=School.CLASSICAL_FORMULA)

    def test_draw_from_front(self):
        first, second, third = make_herb(1), make_herb(2), make_herb(3)
        self.player.deck = [first, second, third]

        drawn = self.player.draw_cards(2)

        assert drawn == [first, second]
        assert self.player.hand == [first, second]
        assert self.player.deck == [third]

    def test_draw_stops_when_deck_empty(self):
        card = make_herb()
        self.player.deck = [card]
        drawn = self.player.draw_cards(5)
        assert drawn == [card]
        assert self.player.deck_count == 0

    def test_draw_from_empty_deck_is_noop(self):
        assert self.player.draw_cards(3) == []
        assert self.player.hand_count == 0

    def test_remove_card(self):
        card = make_herb()
        self.player.hand = [card]
        assert self.player.remove_card(card) is True
        assert self.player.remove_card(card) is False

    def test_remove_cards(self):
        a, b = make_herb(), make_point()
        self.player.hand = [a, b]
        removed = self.player.remove_cards([a, make_herb()])
        assert removed == [a]
        assert self.player.hand == [b]

    def test_cards_of_keeps_hand_order(self):
        h1, p1, h2 = make_herb(1), make_point(), make_herb(2)
        self.player.hand = [h1, p1, h2]
        assert self.player.cards_of(CardType.HERB) == [h1, h2]
        assert self.player.cards_of(CardType.ACUPOINT) == [p1]


class TestPlayerHealth:
    def setup_method(self):
        self.player = Player(name="温邪", role=PlayerRole.DISEASE, school=School.WARM_DISEASE,
                             health=50)

    def test_take_damage_returns_loss(self):
        assert self.player.take_damage(20) == 20
        assert self.player.health == 30

    def test_take_damage_floors_at_zero(self):
        assert self.player.take_damage(80) == 50
        assert self.player.health == 0
        assert not self.player.is_alive

    def test_heal_caps_at_max(self):
        assert self.player.heal(80) == 50
        assert self.player.health == 100

    def test_to_dict(self):
        data = self.player.to_dict()
        assert data["role"] == "disease"
        assert data["health"] == 50
