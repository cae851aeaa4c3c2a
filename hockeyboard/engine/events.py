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
"""Event domain models for the match timeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hockeyboard.engine.config import MAX_QUARTERS


@dataclass(frozen=True, slots=True)
class MatchEvent:
    """Single entry in the match timeline.

    Parameters
    ----------
    quarter : int
        Quarter in progress when the event was recorded, between 1 and ``MAX_QUARTERS``.
    description : str
        Human-readable summary of what happened.
    event_type : str, default="note"
        Category of event (``"goal"``, ``"card"``, ``"penalty_corner"`` or ``"quarter"``).
    team : str | None, optional
        Name of the team the event concerns, when there is one.
    """

    quarter: int
    description: str
    event_type: str = "note"  # goal, card, penalty_corner, quarter
    team: Optional[str] = None

    def __post_init__(self) -> None:
        """Reject quarter numbers that cannot occur in a match.

        Raises
        ------
        ValueError
            If ``quarter`` is outside ``1..MAX_QUARTERS``.
        """
        if not 1 <= self.quarter <= MAX_QUARTERS:
            raise ValueError(f"Quarter must be between 1 and {MAX_QUARTERS}, got {self.quarter}")

    def __str__(self) -> str:
        return f"Q{self.quarter} - {self.description}"
