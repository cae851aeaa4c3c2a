#!/usr/bin/env python3
"""
Summarise a scoreboard debug log written with ``hockeyboard --debug``.

Usage:
    python tools/analyze_match_log.py <log_file_path>
"""

import re
import sys
from collections import Counter, defaultdict
from pathlib import Path

EVENT_PATTERN = re.compile(r"MATCH_EVENT: Quarter: (\d+) \| Event: (\w+)(?: \| Team: (.+?))? \| Details: (.+)$")
ERROR_PATTERN = re.compile(r"ERROR: Type: (\w+) \| Details: (.+)$")


def parse_log_file(log_path):
    """Parse the debug log and extract per-team and per-quarter counts."""

    event_types = Counter()
    per_quarter = Counter()
    per_team = defaultdict(Counter)
    cards = defaultdict(Counter)
    errors = Counter()
    timeline = []

    with open(log_path, "r", encoding="utf-8") as f:
        for line in f:
            match = EVENT_PATTERN.search(line)
            if match:
                quarter, event_type, team, details = match.groups()
                quarter = int(quarter)
                event_types[event_type] += 1
                timeline.append((quarter, details.strip()))
                if event_type == "quarter":
                    continue
                per_quarter[quarter] += 1
                if team:
                    per_team[team][event_type] += 1
                if event_type == "card":
                    cards[team][details.split(" card", 1)[0]] += 1
                continue

            error = ERROR_PATTERN.search(line)
            if error:
                errors[error.group(1)] += 1

    return {
        "event_types": event_types,
        "per_quarter": per_quarter,
        "per_team": per_team,
        "cards": cards,
        "errors": errors,
        "timeline": timeline,
    }


def print_report(stats):
    """Print a human-readable summary of parsed log statistics."""

    print("=" * 40)
    print("MATCH LOG SUMMARY")
    print("=" * 40)

    print("\nEvents by type:")
    for event_type, count in stats["event_types"].most_common():
        print(f"  {event_type:<16} {count}")

    print("\nActions per quarter:")
    for quarter in sorted(stats["per_quarter"]):
        print(f"  Q{quarter}: {stats['per_quarter'][quarter]}")

    print("\nPer team:")
    for team, counts in sorted(stats["per_team"].items()):
        card_summary = ", ".join(f"{kind}: {n}" for kind, n in sorted(stats["cards"][team].items())) or "none"
        print(
            f"  {team}: goals {counts['goal']}, penalty corners {counts['penalty_corner']}, cards ({card_summary})"
        )

    if stats["errors"]:
        print("\nRejected input:")
        for error_type, count in stats["errors"].most_common():
            print(f"  {error_type:<16} {count}")

    print(f"\nTimeline entries: {len(stats['timeline'])}")


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)

    log_path = Path(sys.argv[1])
    if not log_path.exists():
        print(f"Log file not found: {log_path}")
        sys.exit(1)

    print_report(parse_log_file(log_path))


if __name__ == "__main__":
    main()
