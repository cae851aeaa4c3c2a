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
"""Text rendering of the scoreboard, event log and action menu."""

from __future__ import annotations

from typing import Iterable, List, Optional

from hockeyboard.engine.config import SCOREBOARD_CONFIG, DisplayConfig
from hockeyboard.engine.events import MatchEvent
from hockeyboard.engine.match import HockeyMatch


def format_scoreboard(match: HockeyMatch, display: Optional[DisplayConfig] = None) -> str:
    """Render the score, quarter and per-team discipline counters.

    Parameters
    ----------
    match : HockeyMatch
        Match whose state should be rendered.
    display : DisplayConfig | None, optional
        Layout settings; defaults to ``SCOREBOARD_CONFIG.display``.

    Returns
    -------
    str
        Multi-line scoreboard block ready to print.
    """
    display = display or SCOREBOARD_CONFIG.display
    width = display.name_width
    home, away = match.home, match.away

    quarter_line = f"Quarter: {match.quarter}/{match.rules.quarters}"
    if match.is_over:
        quarter_line += " (full time)"

    lines = [
        "",
        display.title,
        f"{home.name:<{width}} {home.goals} - {away.goals} {away.name:<{width}}",
        quarter_line,
        "",
        "Cards & PCs:",
        f"{home.name:<{width}} {home.stats_line()}",
        f"{away.name:<{width}} {away.stats_line()}",
        "=" * len(display.title),
        "",
    ]
    return "\n".join(lines)


def format_event_log(events: Iterable[MatchEvent], display: Optional[DisplayConfig] = None) -> str:
    """Render every event in chronological order.

    Parameters
    ----------
    events : Iterable[MatchEvent]
        Timeline entries, oldest first.
    display : DisplayConfig | None, optional
        Layout settings; defaults to ``SCOREBOARD_CONFIG.display``.

    Returns
    -------
    str
        Event log block, or the empty-log placeholder when there are no events.
    """
    display = display or SCOREBOARD_CONFIG.display
    lines: List[str] = ["", "--- Event Log ---"]
    entries = [str(event) for event in events]
    lines.extend(entries or [display.empty_log_message])
    lines.extend(["-" * len("--- Event Log ---"), ""])
    return "\n".join(lines)


def format_menu(match: HockeyMatch) -> str:
    """Render the numbered list of actions.

    Parameters
    ----------
    match : HockeyMatch
        Match providing the team names shown in the goal actions.

    Returns
    -------
    str
        Menu text without the trailing ``"Choice: "`` prompt.
    """
    return "\n".join(
        [
            "Actions:",
            f"1. Goal {match.home.name}",
            f"2. Goal {match.away.name}",
            "3. Green card",
            "4. Yellow card",
            "5. Red card",
            "6. Penalty corner",
            "7. Next quarter",
            "8. Show event log",
            "9. Quit match early",
        ]
    )
