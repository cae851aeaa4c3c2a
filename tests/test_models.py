# Copyright (C) 2025 Richard Owen
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""Tests for team models and card types."""

import pytest

from hockeyboard.models.team import CardType, Team, TeamStats


class TestCardType:
    """Tests for the CardType enumeration."""

    def test_labels(self) -> None:
        """Each card exposes the label used in the event log."""
        assert [card.label for card in CardType] == ["Green", "Yellow", "Red"]

    def test_lookup_by_label(self) -> None:
        assert CardType("Yellow") is CardType.YELLOW


class TestTeam:
    """Tests for Team class."""

    def test_create_team(self) -> None:
        """A new team keeps its name and starts with every counter at zero."""
        team = Team("Hurricanes")
        assert team.name == "Hurricanes"
        assert team.goals == 0
        assert team.green_cards == 0
        assert team.yellow_cards == 0
        assert team.red_cards == 0
        assert team.penalty_corners == 0

    def test_name_is_read_only(self) -> None:
        team = Team("X")
        with pytest.raises(AttributeError):
            team.name = "Y"  # type: ignore[misc]
        team.score_goal()
        team.award_card(CardType.RED)
        team.award_penalty_corner()
        assert team.name == "X"

    def test_score_goal(self) -> None:
        team = Team("X")
        for _ in range(3):
            team.score_goal()
        assert team.goals == 3

    @pytest.mark.parametrize("kind", list(CardType))
    def test_award_card_only_touches_that_kind(self, kind: CardType) -> None:
        """Awarding one card kind leaves every other counter unchanged."""
        team = Team("X")
        for _ in range(4):
            team.award_card(kind)

        assert team.card_count(kind) == 4
        for other in CardType:
            if other is not kind:
                assert team.card_count(other) == 0
        assert team.goals == 0
        assert team.penalty_corners == 0

    def test_award_card_accepts_label(self) -> None:
        team = Team("X")
        team.award_card("Green")
        assert team.green_cards == 1

    @pytest.mark.parametrize("kind", ["Blue", "yellow", 3, None])
    def test_award_card_rejects_unknown_kind(self, kind: object) -> None:
        """Values outside the card enumeration raise ValueError and change nothing."""
        team = Team("X")
        with pytest.raises(ValueError, match="Invalid card type"):
            team.award_card(kind)  # type: ignore[arg-type]
        assert team.stats_line() == "0G 0Y 0R 0PC"

    def test_award_penalty_corner(self) -> None:
        team = Team("X")
        team.award_penalty_corner()
        team.award_penalty_corner()
        assert team.penalty_corners == 2

    def test_stats_line(self) -> None:
        """The stats line lists green, yellow, red and penalty corners in order."""
        team = Team("X")
        team.award_card(CardType.GREEN)
        team.award_card(CardType.YELLOW)
        team.award_card(CardType.YELLOW)
        team.award_penalty_corner()
        team.award_penalty_corner()
        team.award_penalty_corner()
        assert team.stats_line() == "1G 2Y 0R 3PC"

    def test_snapshot_is_frozen_copy(self) -> None:
        """Snapshots do not follow later changes and cannot be modified."""
        team = Team("X")
        team.score_goal()
        snap = team.snapshot()
        team.score_goal()

        assert isinstance(snap, TeamStats)
        assert snap.goals == 1
        assert team.goals == 2
        with pytest.raises(AttributeError):
            snap.goals = 5  # type: ignore[misc]
