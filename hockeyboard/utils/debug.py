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
"""Structured logging utilities used to trace scoreboard sessions."""

from __future__ import annotations

import time
from collections import deque
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Deque, List, Optional, TextIO, Tuple, Type

if TYPE_CHECKING:
    from hockeyboard.models.team import TeamStats


class MatchDebugger:
    """Helper object that streams match activity to a session log on disk.

    Parameters
    ----------
    output_dir : str | Path, default="debug_logs"
        Directory where new session logs are created; created automatically when missing.
    history : int, default=200
        Number of recent lines kept in memory for live displays.
    """

    def __init__(self, output_dir: str | Path = "debug_logs", history: int = 200) -> None:
        """Initialise the debugger and start the first logging session.

        Parameters
        ----------
        output_dir : str | Path
            Filesystem directory where log files are created.
        history : int
            Number of recent lines kept in memory.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.log_file: Optional[TextIO] = None
        self.log_path: Optional[Path] = None
        self.session_start = time.strftime("%Y%m%d_%H%M%S")
        self._line_number = 1
        self._recent_events: Deque[Tuple[int, str]] = deque(maxlen=history)
        self.start_new_session()

    def __enter__(self) -> "MatchDebugger":
        """Return the debugger so it can be used in a ``with`` block.

        Returns
        -------
        MatchDebugger
            This debugger instance.
        """
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def start_new_session(self) -> None:
        """Start a new debug logging session."""
        if self.log_file:
            self.log_file.close()

        self.log_path = self.output_dir / f"match_debug_{self.session_start}.txt"
        self.log_file = open(self.log_path, "w", encoding="utf-8")
        self.log_file.write(f"=== Match Debug Session: {time.strftime('%Y-%m-%d %H:%M:%S')} ===\n\n")

    def log_match_event(self, quarter: int, event_type: str, description: str, team: str | None = None) -> None:
        """Log a match event (goal, card, quarter change, etc.).

        Parameters
        ----------
        quarter : int
            Quarter in progress when the event happened.
        event_type : str
            Short label identifying the event category.
        description : str
            Human-readable summary of the event.
        team : str | None
            Name of the team involved, when known.
        """
        team_str = f" | Team: {team}" if team else ""
        self._write_log("MATCH_EVENT", f"Quarter: {quarter} | Event: {event_type}{team_str} | Details: {description}")

    def log_scoreboard(self, home: "TeamStats", away: "TeamStats", quarter: int) -> None:
        """Log a snapshot of the score and both teams' counters.

        Parameters
        ----------
        home : TeamStats
            Snapshot of the home team.
        away : TeamStats
            Snapshot of the away team.
        quarter : int
            Current quarter.
        """
        self._write_log(
            "SCOREBOARD",
            f"Quarter: {quarter} | "
            f"{home.name} {home.goals} - {away.goals} {away.name} | "
            f"{home.name}: {home.stats_line()} | "
            f"{away.name}: {away.stats_line()}",
        )

    def log_error(self, error_type: str, description: str) -> None:
        """Log an error or warning.

        Parameters
        ----------
        error_type : str
            Label describing the error classification.
        description : str
            Human-readable explanation of the issue.
        """
        self._write_log("ERROR", f"Type: {error_type} | Details: {description}")

    def _write_log(self, event_type: str, details: str) -> None:
        """Write a log entry to the file.

        Parameters
        ----------
        event_type : str
            Category label for the log entry.
        details : str
            Formatted message body to persist.
        """
        timestamp = time.strftime("%H:%M:%S")
        log_entry = f"[{timestamp}] {event_type}: {details}"

        line_no = self._line_number
        self._line_number += 1
        self._recent_events.append((line_no, log_entry))

        if self.log_file:
            self.log_file.write(f"{log_entry}\n")
            self.log_file.flush()

    def get_recent_events(self, limit: int = 20) -> List[str]:
        """Return the latest debug entries with line numbers for live displays.

        Parameters
        ----------
        limit : int
            Maximum number of entries to return.

        Returns
        -------
        List[str]
            Up to ``limit`` most recent log lines with prefixed line numbers.
        """
        selected = list(self._recent_events)[-limit:] if limit > 0 else []
        return [f"{line_no:05d} {entry}" for line_no, entry in selected]

    def close(self) -> None:
        """Close the log file."""
        if self.log_file:
            self.log_file.close()
            self.log_file = None
