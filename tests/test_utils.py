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
"""Tests for utility modules (debug, roster)."""

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

from hockeyboard.engine.match import HockeyMatch, Side
from hockeyboard.models.team import CardType
from hockeyboard.utils.debug import MatchDebugger
from hockeyboard.utils.roster import load_team_names_from_json, team_name_from_entry


class TestRoster:
    """Tests for roster loading helpers."""

    def test_team_name_from_string(self) -> None:
        assert team_name_from_entry("  Tigers ", "Home") == "Tigers"

    def test_team_name_from_mapping(self) -> None:
        assert team_name_from_entry({"name": "Hurricanes", "id": 4}, "Home") == "Hurricanes"

    @pytest.mark.parametrize("entry", [None, "", "   ", {}, {"name": ""}, 42])
    def test_team_name_fallback(self, entry: object) -> None:
        assert team_name_from_entry(entry, "Away") == "Away"

    def test_load_team_names(self, tmp_path: Path) -> None:
        """Both the plain and the mapping form are accepted in one file."""
        roster = tmp_path / "teams.json"
        roster.write_text(json.dumps({"home": {"name": "Hurricanes"}, "away": "Tigers"}), encoding="utf-8")
        assert load_team_names_from_json(roster) == ("Hurricanes", "Tigers")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_team_names_from_json(tmp_path / "missing.json")

    def test_missing_section(self, tmp_path: Path) -> None:
        roster = tmp_path / "teams.json"
        roster.write_text(json.dumps({"home": "Hurricanes"}), encoding="utf-8")
        with pytest.raises(KeyError):
            load_team_names_from_json(roster)

    @pytest.mark.parametrize("payload", [["Hurricanes", "Tigers"], "Hurricanes", 3, None])
    def test_top_level_must_be_object(self, tmp_path: Path, payload: object) -> None:
        """Valid JSON that is not an object is rejected with ValueError."""
        roster = tmp_path / "teams.json"
        roster.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(ValueError, match="must be an object"):
            load_team_names_from_json(roster)

    def test_invalid_json(self, tmp_path: Path) -> None:
        roster = tmp_path / "teams.json"
        roster.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_team_names_from_json(roster)


class TestMatchDebugger:
    """Tests for the session log writer."""

    def test_creates_session_file(self, tmp_path: Path) -> None:
        debugger = MatchDebugger(tmp_path / "logs")
        try:
            assert debugger.log_path is not None
            assert debugger.log_path.parent == tmp_path / "logs"
            assert debugger.log_path.name.startswith("match_debug_")
        finally:
            debugger.close()
        assert debugger.log_path.read_text(encoding="utf-8").startswith("=== Match Debug Session:")

    def test_match_events_are_written(self, tmp_path: Path) -> None:
        """Events appended by a match end up in the log file in order."""
        with MatchDebugger(tmp_path) as debugger:
            match = HockeyMatch("A", "B", debugger=debugger)
            match.goal_for(Side.HOME)
            match.card_for(Side.AWAY, CardType.RED)
            match.advance_quarter()
            log_path = debugger.log_path

        assert debugger.log_file is None
        lines = log_path.read_text(encoding="utf-8").splitlines()
        events = [line for line in lines if "MATCH_EVENT" in line]
        assert "Quarter: 1 | Event: goal | Team: A | Details: A goal!" in events[0]
        assert "Quarter: 1 | Event: card | Team: B | Details: Red card - B" in events[1]
        assert "Details: === Start of Q2 ===" in events[3]
        scoreboard = [line for line in lines if "SCOREBOARD" in line]
        assert scoreboard and "A 1 - 0 B" in scoreboard[0]
        assert "B: 0G 0Y 1R 0PC" in scoreboard[0]

    def test_recent_events_are_numbered(self, tmp_path: Path) -> None:
        with MatchDebugger(tmp_path, history=2) as debugger:
            debugger.log_error("menu_input", "first")
            debugger.log_error("menu_input", "second")
            debugger.log_error("menu_input", "third")
            recent = debugger.get_recent_events()

        assert len(recent) == 2
        assert recent[0].startswith("00002 ")
        assert recent[1].startswith("00003 ")
        assert recent[1].endswith("ERROR: Type: menu_input | Details: third")

    def test_recent_events_limit(self, tmp_path: Path) -> None:
        with MatchDebugger(tmp_path) as debugger:
            for i in range(5):
                debugger.log_error("menu_choice", str(i))
            assert len(debugger.get_recent_events(limit=3)) == 3
            assert debugger.get_recent_events(limit=0) == []


def _load_log_analyzer() -> ModuleType:
    """Import tools/analyze_match_log.py, which lives outside the package."""
    path = Path(__file__).resolve().parents[1] / "tools" / "analyze_match_log.py"
    module_spec = importlib.util.spec_from_file_location("analyze_match_log", path)
    assert module_spec is not None and module_spec.loader is not None
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


class TestAnalyzeMatchLog:
    """The log summary tool reads what MatchDebugger writes."""

    def test_parses_real_session_log(self, tmp_path: Path) -> None:
        with MatchDebugger(tmp_path) as debugger:
            match = HockeyMatch("A", "B", debugger=debugger)
            match.goal_for(Side.HOME, scorer="Lee")
            match.card_for(Side.AWAY, CardType.YELLOW)
            match.penalty_corner_for(Side.AWAY)
            match.advance_quarter()
            match.goal_for(Side.AWAY)
            debugger.log_error("menu_input", "Invalid input. Please enter a number.")
            log_path = debugger.log_path

        stats = _load_log_analyzer().parse_log_file(log_path)

        assert stats["event_types"] == {"goal": 2, "card": 1, "penalty_corner": 1, "quarter": 2}
        assert stats["per_quarter"] == {1: 3, 2: 1}
        assert stats["per_team"]["A"]["goal"] == 1
        assert stats["per_team"]["B"]["goal"] == 1
        assert stats["per_team"]["B"]["penalty_corner"] == 1
        assert stats["cards"]["B"] == {"Yellow": 1}
        assert stats["errors"] == {"menu_input": 1}
        assert [str(event) for event in match.events] == [
            f"Q{quarter} - {details}" for quarter, details in stats["timeline"]
        ]

    def test_report_prints_team_totals(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with MatchDebugger(tmp_path) as debugger:
            match = HockeyMatch("A", "B", debugger=debugger)
            match.card_for(Side.HOME, CardType.RED)
            log_path = debugger.log_path

        analyzer = _load_log_analyzer()
        analyzer.print_report(analyzer.parse_log_file(log_path))

        out = capsys.readouterr().out
        assert "MATCH LOG SUMMARY" in out
        assert "A: goals 0, penalty corners 0, cards (Red: 1)" in out
