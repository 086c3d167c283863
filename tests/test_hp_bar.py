"""正气/邪气条测试"""

import pytest

from ui.hp_bar import HP_BAR_WIDTH, filled_segments, hp_style, render_hp_bar, rich_hp_bar


class TestRenderHpBar:
    def test_partial(self):
        assert render_hp_bar(55, 100) == "[███████████░░░░░░░░░] 55/100"

    def test_full(self):
        assert render_hp_bar(100, 100) == "[" + "█" * 20 + "] 100/100"

    def test_empty(self):
        assert render_hp_bar(0, 100) == "[" + "░" * 20 + "] 0/100"

    @pytest.mark.parametrize("health, filled", [(4, 0), (5, 1), (99, 19), (150, 20), (-3, 0)])
    def test_filled_segments_floor_and_clamp(self, health, filled):
        assert filled_segments(health, 100) == filled

    def test_zero_max(self):
        assert filled_segments(10, 0) == 0

    def test_rich_matches_plain(self):
        for health in (0, 33, 55, 100):
            assert rich_hp_bar(health, 100).plain == render_hp_bar(health, 100)

    def test_width(self):
        bar = render_hp_bar(50, 100)
        assert len(bar.split("]")[0]) - 1 == HP_BAR_WIDTH


class TestHpStyle:
    def test_colors(self):
        assert hp_style(80, 100) == "green"
        assert hp_style(50, 100) == "yellow"
        assert hp_style(10, 100) == "red"
        assert hp_style(1, 0) == "red"
