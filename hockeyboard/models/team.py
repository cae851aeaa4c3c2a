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
"""Team domain models for the scoreboard."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class CardType(Enum):
    """Disciplinary cards an umpire can show during a field hockey match."""

    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"

    @property
    def label(self) -> str:
        """Return the display name used in the event log (for example ``"Yellow"``)."""
        return self.value


@dataclass(frozen=True, slots=True)
class TeamStats:
    """Read-only snapshot of a team's counters.

    Parameters
    ----------
    name : str
        Display name of the team.
    goals : int
        Goals scored so far.
    green_cards : int
        Green cards received.
    yellow_cards : int
        Yellow cards received.
    red_cards : int
        Red cards received.
    penalty_corners : int
        Penalty corners awarded.
    """

    name: str
    goals: int = 0
    green_cards: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    penalty_corners: int = 0

    def stats_line(self) -> str:
        """Summarise cards and penalty corners in compact form.

        Returns
        -------
        str
            Counters formatted as ``"<G>G <Y>Y <R>R <PC>PC"``.
        """
        return f"{self.green_cards}G {self.yellow_cards}Y {self.red_cards}R {self.penalty_corners}PC"


class Team:
    """One side of a match and the counters recorded against it.

    Every counter starts at zero and only ever increases. The name is fixed at
    construction and exposed read-only.

    Parameters
    ----------
    name : str
        Display name for the team.
    """

    def __init__(self, name: str) -> None:
        """Create a team with all counters at zero.

        Parameters
        ----------
        name : str
            Display name for the team.
        """
        self._name = name
        self._goals = 0
        self._card_counts: Dict[CardType, int] = {kind: 0 for kind in CardType}
        self._penalty_corners = 0

    def __repr__(self) -> str:
        return f"Team(name={self._name!r}, goals={self._goals}, stats={self.stats_line()!r})"

    @property
    def name(self) -> str:
        """Return the team's display name."""
        return self._name

    @property
    def goals(self) -> int:
        """Return the number of goals scored."""
        return self._goals

    @property
    def penalty_corners(self) -> int:
        """Return the number of penalty corners awarded."""
        return self._penalty_corners

    @property
    def green_cards(self) -> int:
        """Return the number of green cards received."""
        return self._card_counts[CardType.GREEN]

    @property
    def yellow_cards(self) -> int:
        """Return the number of yellow cards received."""
        return self._card_counts[CardType.YELLOW]

    @property
    def red_cards(self) -> int:
        """Return the number of red cards received."""
        return self._card_counts[CardType.RED]

    def card_count(self, kind: Union[CardType, str]) -> int:
        """Return how many cards of one kind the team has received.

        Parameters
        ----------
        kind : CardType | str
            Card kind, or its display label (for example ``"Red"``).

        Returns
        -------
        int
            Number of cards of ``kind`` shown to the team.
        """
        return self._card_counts[self._coerce_card(kind)]

    def score_goal(self) -> None:
        """Add one goal to the team's total."""
        self._goals += 1

    def award_card(self, kind: Union[CardType, str]) -> None:
        """Record a card shown to the team.

        Parameters
        ----------
        kind : CardType | str
            Card kind, or its display label.

        Raises
        ------
        ValueError
            If ``kind`` is not one of the known card types.
        """
        self._card_counts[self._coerce_card(kind)] += 1

    def award_penalty_corner(self) -> None:
        """Add one penalty corner to the team's total."""
        self._penalty_corners += 1

    def stats_line(self) -> str:
        """Summarise cards and penalty corners in compact form.

        Returns
        -------
        str
            Counters formatted as ``"<G>G <Y>Y <R>R <PC>PC"``.
        """
        return self.snapshot().stats_line()

    def snapshot(self) -> TeamStats:
        """Capture the current counters as an immutable value.

        Returns
        -------
        TeamStats
            Frozen copy of the name and every counter.
        """
        return TeamStats(
            name=self._name,
            goals=self._goals,
            green_cards=self.green_cards,
            yellow_cards=self.yellow_cards,
            red_cards=self.red_cards,
            penalty_corners=self._penalty_corners,
        )

    @staticmethod
    def _coerce_card(kind: Union[CardType, str]) -> CardType:
        """Normalise ``kind`` to a :class:`CardType`.

        Parameters
        ----------
        kind : CardType | str
            Candidate card kind.

        Returns
        -------
        CardType
            The matching enumeration member.

        Raises
        ------
        ValueError
            If ``kind`` does not name a card type.
        """
        try:
            return CardType(kind)
        except ValueError as exc:
            known = ", ".join(card.label for card in CardType)
            raise ValueError(f"Invalid card type {kind!r}. Known card types: {known}") from exc
