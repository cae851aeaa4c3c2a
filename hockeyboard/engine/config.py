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
"""Central configuration for match rules and console presentation."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_QUARTERS = 4
"""A field hockey match is played over four quarters."""


@dataclass(slots=True)
class MatchRulesConfig:
    """Rules governing quarters and the bookkeeping events they produce.

    Parameters
    ----------
    quarters : int, default=4
        Number of quarters in a match, between 1 and ``MAX_QUARTERS``.
    log_quarter_starts : bool, default=True
        Append a ``"=== Start of Q<n> ==="`` marker after each quarter change.
    log_match_start : bool, default=False
        Append a ``"=== Start of Q1 ==="`` marker when the match is created.
    """

    quarters: int = MAX_QUARTERS
    log_quarter_starts: bool = True
    log_match_start: bool = False

    def __post_init__(self) -> None:
        """Ensure the quarter count fits a field hockey match.

        Raises
        ------
        ValueError
            If ``quarters`` is outside ``1..MAX_QUARTERS``.
        """
        if not 1 <= self.quarters <= MAX_QUARTERS:
            raise ValueError(f"A match must have between 1 and {MAX_QUARTERS} quarters, got {self.quarters}")


@dataclass(slots=True)
class DisplayConfig:
    """Layout and pacing settings for the console scoreboard.

    Parameters
    ----------
    title : str, default="=== FIELD HOCKEY SCOREBOARD ==="
        Heading printed above the scoreboard.
    name_width : int, default=20
        Column width reserved for team names.
    clear_screen : bool, default=True
        Whether to clear the terminal before redrawing the scoreboard.
    clear_sequence : str, default="\\x1b[2J\\x1b[H"
        ANSI escape sequence that clears the screen and homes the cursor.
    action_pause : float, default=0.8
        Seconds to pause after a card or penalty corner prompt.
    message_pause : float, default=1.0
        Seconds to pause after a status or error message.
    empty_log_message : str, default="No events yet."
        Placeholder shown when the event log is empty.
    """

    title: str = "=== FIELD HOCKEY SCOREBOARD ==="
    name_width: int = 20
    clear_screen: bool = True
    clear_sequence: str = "\x1b[2J\x1b[H"  # works on macOS, Linux, most terminals
    action_pause: float = 0.8
    message_pause: float = 1.0
    empty_log_message: str = "No events yet."


@dataclass(slots=True)
class ScoreboardConfig:
    """Top-level container for all scoreboard settings.

    Parameters
    ----------
    rules : MatchRulesConfig, default=MatchRulesConfig()
        Quarter and event-marker rules.
    display : DisplayConfig, default=DisplayConfig()
        Console layout and pacing.
    """

    rules: MatchRulesConfig = field(default_factory=MatchRulesConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


SCOREBOARD_CONFIG = ScoreboardConfig()
"""Singleton-style access to the default scoreboard configuration."""
