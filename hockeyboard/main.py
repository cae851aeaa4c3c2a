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
"""Entry point for the interactive field hockey scoreboard."""
import argparse
import sys
import time
from typing import Callable, List, Optional, TextIO, Tuple

from hockeyboard.engine.config import SCOREBOARD_CONFIG, DisplayConfig, MatchRulesConfig, ScoreboardConfig
from hockeyboard.engine.match import HockeyMatch, Side
from hockeyboard.models.team import CardType
from hockeyboard.utils.debug import MatchDebugger
from hockeyboard.utils.roster import load_team_names_from_json
from hockeyboard.visualizer.console import format_event_log, format_menu, format_scoreboard

CARD_CHOICES = {3: CardType.GREEN, 4: CardType.YELLOW, 5: CardType.RED}


def parse_menu_choice(raw: str) -> Optional[int]:
    """Interpret a line typed at the ``Choice:`` prompt.

    Parameters
    ----------
    raw : str
        Text entered by the user.

    Returns
    -------
    int | None
        The entered number, or ``None`` when the text is not an integer.
    """
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_side(raw: str) -> Optional[Side]:
    """Interpret a team choice from its first non-blank character.

    Parameters
    ----------
    raw : str
        Text entered by the user; ``h``/``a`` in either case.

    Returns
    -------
    Side | None
        The chosen side, or ``None`` for anything unrecognised.
    """
    text = raw.strip().lower()
    if not text:
        return None
    return {"h": Side.HOME, "a": Side.AWAY}.get(text[0])


class ConsoleScoreboard:
    """Numbered-menu loop that drives a :class:`HockeyMatch` from the terminal.

    Parameters
    ----------
    match : HockeyMatch
        Match updated by the menu actions.
    config : ScoreboardConfig | None, optional
        Display settings; defaults to ``SCOREBOARD_CONFIG``.
    input_fn : Callable[[str], str] | None, optional
        Reads one line after showing a prompt; defaults to :func:`input`.
    output : TextIO | None, optional
        Stream receiving rendered text; defaults to ``sys.stdout``.
    sleep_fn : Callable[[float], None] | None, optional
        Pause used after status messages; defaults to :func:`time.sleep`.
    """

    def __init__(
        self,
        match: HockeyMatch,
        config: Optional[ScoreboardConfig] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
        sleep_fn: Optional[Callable[[float], None]] = None,
    ) -> None:
        """Bind the console to a match and its I/O collaborators.

        Parameters
        ----------
        match : HockeyMatch
            Match updated by the menu actions.
        config : ScoreboardConfig | None, optional
            Display settings; defaults to ``SCOREBOARD_CONFIG``.
        input_fn : Callable[[str], str] | None, optional
            Reads one line after showing a prompt.
        output : TextIO | None, optional
            Stream receiving rendered text; defaults to ``sys.stdout``.
        sleep_fn : Callable[[float], None] | None, optional
            Pause used after status messages.
        """
        self.match = match
        self.display: DisplayConfig = (config or SCOREBOARD_CONFIG).display
        self.input_fn = input_fn or input
        self.output = output if output is not None else sys.stdout
        self.sleep_fn = sleep_fn or time.sleep

    def run(self) -> None:
        """Show the scoreboard and handle actions until the match ends or the user quits."""
        try:
            while not self.match.is_over:
                self.clear_screen()
                self.write(format_scoreboard(self.match, self.display))
                self.write(format_menu(self.match))

                choice = parse_menu_choice(self.input_fn("Choice: "))
                if choice is None:
                    self._report_invalid("menu_input", "Invalid input. Please enter a number.")
                    continue
                if not self.handle_choice(choice):
                    break
        except EOFError:
            self.write("\nInput closed. Ending match...")

    def handle_choice(self, choice: int) -> bool:
        """Apply one menu action to the match.

        Parameters
        ----------
        choice : int
            Menu number entered by the user.

        Returns
        -------
        bool
            ``False`` when the loop should stop (match over or quit early).
        """
        if choice in (1, 2):
            side = Side.HOME if choice == 1 else Side.AWAY
            scorer = self.input_fn("Scorer (press Enter to skip): ").strip()
            self.match.goal_for(side, scorer or None)
        elif choice in CARD_CHOICES:
            home, away = self.match.home.name, self.match.away.name
            side = self._ask_side(f"For which team? (h = {home}, a = {away}): ")
            if side is not None:
                self.match.card_for(side, CARD_CHOICES[choice])
            self.sleep_fn(self.display.action_pause)
        elif choice == 6:
            side = self._ask_side("For which team? (h/a): ")
            if side is not None:
                self.match.penalty_corner_for(side)
            self.sleep_fn(self.display.action_pause)
        elif choice == 7:
            if self.match.advance_quarter() == "match_over":
                return False
        elif choice == 8:
            self.clear_screen()
            self.write(format_event_log(self.match.events, self.display))
            self.input_fn("Press Enter to return to scoreboard...")
        elif choice == 9:
            self.write("Ending match early...")
            self.sleep_fn(self.display.message_pause)
            return False
        else:
            self._report_invalid("menu_choice", "Invalid choice. Please try again.")
        return True

    def print_final_result(self) -> None:
        """Print the closing scoreboard and the complete event log."""
        self.clear_screen()
        self.write("\n=== FINAL RESULT ===")
        self.write(format_scoreboard(self.match, self.display))
        self.write(format_event_log(self.match.events, self.display))
        self.write("Match ended. Thank you for using the Field Hockey Scoreboard!\n")

    def clear_screen(self) -> None:
        """Clear the terminal when screen clearing is enabled."""
        if self.display.clear_screen:
            self.output.write(self.display.clear_sequence)

    def write(self, text: str) -> None:
        """Write a block of text followed by a newline.

        Parameters
        ----------
        text : str
            Text to emit.
        """
        self.output.write(f"{text}\n")
        self.output.flush()

    def _ask_side(self, prompt: str) -> Optional[Side]:
        """Prompt for a team and report unrecognised answers.

        Parameters
        ----------
        prompt : str
            Prompt shown to the user.

        Returns
        -------
        Side | None
            The chosen side, or ``None`` after reporting an invalid answer.
        """
        raw = self.input_fn(prompt)
        side = parse_side(raw)
        if side is None:
            self.write("Invalid team choice.")
            if self.match.debugger:
                self.match.debugger.log_error("team_choice", f"Unrecognised team choice {raw!r}")
        return side

    def _report_invalid(self, error_type: str, message: str) -> None:
        """Tell the user their input was rejected, then pause.

        Parameters
        ----------
        error_type : str
            Label recorded in the debug log.
        message : str
            Message shown to the user.
        """
        self.write(message)
        if self.match.debugger:
            self.match.debugger.log_error(error_type, message)
        self.sleep_fn(self.display.message_pause)


def build_parser() -> argparse.ArgumentParser:
    """Describe the command-line options.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the ``hockeyboard`` command.
    """
    parser = argparse.ArgumentParser(description="Interactive field hockey scoreboard")
    parser.add_argument("--home", type=str, default=None, help="Home team name")
    parser.add_argument("--away", type=str, default=None, help="Away team name")
    parser.add_argument("--teams", type=str, default=None, help="Path to a JSON file with home/away team names")
    parser.add_argument(
        "--no-quarter-starts",
        action="store_true",
        help="Do not log a 'Start of Q<n>' marker after each quarter change",
    )
    parser.add_argument("--log-match-start", action="store_true", help="Log a 'Start of Q1' marker at kick-off")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between redraws")
    parser.add_argument("--debug", action="store_true", help="Write a debug log of the session")
    parser.add_argument("--debug-dir", type=str, default="debug_logs", help="Directory for debug logs")
    return parser


def resolve_team_names(
    args: argparse.Namespace, input_fn: Optional[Callable[[str], str]] = None
) -> Tuple[str, str]:
    """Work out team names from a roster file, flags, or interactive prompts.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line options.
    input_fn : Callable[[str], str] | None, optional
        Reads a line after showing a prompt; defaults to :func:`input`.

    Returns
    -------
    tuple[str, str]
        Team names in ``(home, away)`` order.
    """
    input_fn = input_fn or input
    home, away = args.home, args.away
    if args.teams:
        try:
            home, away = load_team_names_from_json(args.teams)
        except (OSError, KeyError, ValueError) as e:
            print(f"Error loading teams from {args.teams}: {e}")
            print("Falling back to entered team names...")

    if not home:
        home = _prompt_name("Enter home team: ", "Home", input_fn)
    if not away:
        away = _prompt_name("Enter away team: ", "Away", input_fn)
    return home, away


def _prompt_name(prompt: str, default: str, input_fn: Callable[[str], str]) -> str:
    """Ask for a team name, using ``default`` for blank input or closed stdin.

    Parameters
    ----------
    prompt : str
        Prompt shown to the user.
    default : str
        Name used when nothing is entered.
    input_fn : Callable[[str], str]
        Reads a line after showing a prompt.

    Returns
    -------
    str
        The entered name or ``default``.
    """
    try:
        return input_fn(prompt).strip() or default
    except EOFError:
        return default


def main(argv: Optional[List[str]] = None) -> None:
    """Run one match from team entry through to the final result.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments; ``sys.argv[1:]`` when omitted.
    """
    args = build_parser().parse_args(argv)
    config = ScoreboardConfig(
        rules=MatchRulesConfig(
            log_quarter_starts=not args.no_quarter_starts,
            log_match_start=args.log_match_start,
        ),
        display=DisplayConfig(clear_screen=not args.no_clear),
    )

    print("\U0001F3D1 Welcome to the Field Hockey Scoreboard \U0001F3D1\n")
    try:
        home_name, away_name = resolve_team_names(args)
    except KeyboardInterrupt:
        print("\nSetup interrupted. No match was started.")
        return

    debugger: Optional[MatchDebugger] = None
    if args.debug:
        try:
            debugger = MatchDebugger(args.debug_dir)
        except OSError as e:
            print(f"Could not start a debug log in {args.debug_dir}: {e}")
            print("Continuing without a debug log...")

    match = HockeyMatch(home_name, away_name, rules=config.rules, debugger=debugger)
    console = ConsoleScoreboard(match, config=config)

    try:
        console.run()
    except KeyboardInterrupt:
        print("\nMatch interrupted.")
    finally:
        console.print_final_result()
        if debugger is not None:
            print(f"Debug log written to {debugger.log_path}")
            debugger.close()


if __name__ == "__main__":
    main()
