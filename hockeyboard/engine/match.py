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
"""Match orchestration: quarters, team actions and the event timeline."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Tuple, Union

from hockeyboard.engine.config import SCOREBOARD_CONFIG, MatchRulesConfig
from hockeyboard.engine.events import MatchEvent
from hockeyboard.models.team import CardType, Team, TeamStats
from hockeyboard.utils.debug import MatchDebugger

QuarterOutcome = Literal["continuing", "match_over"]


class Side(Enum):
    """Which of the two teams an action applies to."""

    HOME = "home"
    AWAY = "away"


class HockeyMatch:
    """Scoreboard state for a single field hockey match.

    The match owns both teams and the event log. Every action updates the
    relevant team and appends one timeline entry before returning, so the log
    always mirrors the counters.

    Parameters
    ----------
    home_name : str
        Display name of the home team.
    away_name : str
        Display name of the away team.
    rules : MatchRulesConfig | None, optional
        Quarter rules; defaults to ``SCOREBOARD_CONFIG.rules``.
    debugger : MatchDebugger | None, optional
        Optional logging helper that receives every appended event.
    """

    def __init__(
        self,
        home_name: str,
        away_name: str,
        rules: Optional[MatchRulesConfig] = None,
        debugger: Optional[MatchDebugger] = None,
    ) -> None:
        """Create a match at the start of the first quarter.

        Parameters
        ----------
        home_name : str
            Display name of the home team.
        away_name : str
            Display name of the away team.
        rules : MatchRulesConfig | None, optional
            Quarter rules; defaults to ``SCOREBOARD_CONFIG.rules``.
        debugger : MatchDebugger | None, optional
            Optional logging helper that receives every appended event.
        """
        self.rules = rules if rules is not None else SCOREBOARD_CONFIG.rules
        self.debugger = debugger
        self._home_team = Team(home_name)
        self._away_team = Team(away_name)
        self._current_quarter = 1
        self._is_over = False
        self._event_log: List[MatchEvent] = []

        if self.rules.log_match_start:
            self._log("=== Start of Q1 ===", "quarter")

    # --------------------- Read-only accessors ---------------------

    @property
    def home(self) -> TeamStats:
        """Return a snapshot of the home team."""
        return self._home_team.snapshot()

    @property
    def away(self) -> TeamStats:
        """Return a snapshot of the away team."""
        return self._away_team.snapshot()

    @property
    def quarter(self) -> int:
        """Return the current quarter (stays on the last quarter once the match ends)."""
        return self._current_quarter

    @property
    def is_over(self) -> bool:
        """Return ``True`` once the final quarter has been closed."""
        return self._is_over

    @property
    def events(self) -> Tuple[MatchEvent, ...]:
        """Return the timeline in chronological order."""
        return tuple(self._event_log)

    def team(self, side: Union[Side, str]) -> TeamStats:
        """Return a snapshot of the team playing on ``side``.

        Parameters
        ----------
        side : Side | str
            ``Side.HOME``/``Side.AWAY`` or their string values.

        Returns
        -------
        TeamStats
            Frozen copy of that team's counters.
        """
        return self._team_for(side).snapshot()

    # --------------------- Match actions ---------------------

    def goal_for(self, side: Union[Side, str], scorer: Optional[str] = None) -> MatchEvent:
        """Credit a goal to one team.

        Parameters
        ----------
        side : Side | str
            Team that scored.
        scorer : str | None, optional
            Name of the goal scorer, appended to the description when given.

        Returns
        -------
        MatchEvent
            The timeline entry recorded for the goal.
        """
        team = self._team_for(side)
        team.score_goal()
        description = f"{team.name} goal!"
        if scorer:
            description += f" ({scorer})"
        return self._log(description, "goal", team)

    def card_for(self, side: Union[Side, str], kind: Union[CardType, str]) -> MatchEvent:
        """Show a card to one team.

        Parameters
        ----------
        side : Side | str
            Team receiving the card.
        kind : CardType | str
            Card kind shown.

        Returns
        -------
        MatchEvent
            The timeline entry recorded for the card.

        Raises
        ------
        ValueError
            If ``kind`` is not a known card type; nothing is logged in that case.
        """
        team = self._team_for(side)
        team.award_card(kind)
        return self._log(f"{CardType(kind).label} card - {team.name}", "card", team)

    def penalty_corner_for(self, side: Union[Side, str]) -> MatchEvent:
        """Award a penalty corner to one team.

        Parameters
        ----------
        side : Side | str
            Team awarded the penalty corner.

        Returns
        -------
        MatchEvent
            The timeline entry recorded for the penalty corner.
        """
        team = self._team_for(side)
        team.award_penalty_corner()
        return self._log(f"Penalty corner - {team.name}", "penalty_corner", team)

    def advance_quarter(self) -> QuarterOutcome:
        """Close the current quarter and move to the next one.

        Returns
        -------
        QuarterOutcome
            ``"continuing"`` while quarters remain, ``"match_over"`` once the
            final quarter has been closed. Calls after the match has ended
            change nothing and return ``"match_over"`` again.
        """
        if self._is_over:
            return "match_over"

        self._log(f"=== End of Q{self._current_quarter} ===", "quarter")

        if self._current_quarter >= self.rules.quarters:
            self._is_over = True
            self._log_scoreboard()
            return "match_over"

        self._current_quarter += 1
        if self.rules.log_quarter_starts:
            self._log(f"=== Start of Q{self._current_quarter} ===", "quarter")
        self._log_scoreboard()
        return "continuing"

    # --------------------- Internals ---------------------

    def _team_for(self, side: Union[Side, str]) -> Team:
        """Resolve a side to the owned team instance.

        Parameters
        ----------
        side : Side | str
            Side to resolve.

        Returns
        -------
        Team
            The mutable team owned by this match.

        Raises
        ------
        ValueError
            If ``side`` is neither home nor away.
        """
        try:
            resolved = Side(side)
        except ValueError as exc:
            raise ValueError(f"Unknown side {side!r}. Expected 'home' or 'away'") from exc
        return self._home_team if resolved is Side.HOME else self._away_team

    def _log(self, description: str, event_type: str, team: Optional[Team] = None) -> MatchEvent:
        """Append an event stamped with the current quarter.

        Parameters
        ----------
        description : str
            Human-readable summary of the event.
        event_type : str
            Category label for the event.
        team : Team | None, optional
            Team the event concerns.

        Returns
        -------
        MatchEvent
            The appended event.
        """
        event = MatchEvent(
            quarter=self._current_quarter,
            description=description,
            event_type=event_type,
            team=team.name if team is not None else None,
        )
        self._event_log.append(event)
        if self.debugger:
            self.debugger.log_match_event(event.quarter, event.event_type, event.description, event.team)
        return event

    def _log_scoreboard(self) -> None:
        """Forward a scoreboard snapshot to the debugger, when one is attached."""
        if self.debugger:
            self.debugger.log_scoreboard(self.home, self.away, self._current_quarter)
