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
"""Utilities for reading team names from serialized roster files.

The roster format mirrors the squad files used by other match tools: a JSON
document with ``home`` and ``away`` sections. Each section may be a plain
string or a mapping with a ``name`` key, so both a minimal
``{"home": "Hurricanes", "away": "Tigers"}`` file and a richer squad
description are accepted.
"""
import json
from pathlib import Path
from typing import Any, Tuple, Union


def team_name_from_entry(entry: Any, fallback: str) -> str:
    """Extract a team name from one roster section.

    Parameters
    ----------
    entry
        Either a string or a mapping containing a ``name`` key.
    fallback
        Name returned when the entry carries no usable name.

    Returns
    -------
    str
        The stripped team name, or ``fallback`` when it is missing or blank.
    """
    if isinstance(entry, dict):
        entry = entry.get("name")
    if isinstance(entry, str) and entry.strip():
        return entry.strip()
    return fallback


def load_team_names_from_json(path: Union[str, Path]) -> Tuple[str, str]:
    """Load the home and away team names from a roster JSON file.

    Parameters
    ----------
    path
        The filesystem path to the JSON document.

    Returns
    -------
    tuple[str, str]
        Team names in ``(home, away)`` order.

    Raises
    ------
    FileNotFoundError
        Raised when ``path`` does not exist.
    KeyError
        Raised when the JSON payload is missing the ``home`` or ``away`` section.
    ValueError
        Raised when the file is not valid JSON or its top level is not an object.

    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Roster JSON not found: {path}")

    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Roster JSON must be an object with home and away sections, got {type(data).__name__}")

    home = team_name_from_entry(data["home"], "Home")
    away = team_name_from_entry(data["away"], "Away")
    return home, away
