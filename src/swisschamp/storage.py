"""JSON snapshot storage for championships.

This is the thin persistence adapter around the engine: the engine itself
only ever sees TournamentState objects. Loading soft-migrates snapshots
written by older versions and recomputes standings.
"""

# Swiss Champ
# Copyright (C) 2025  Swiss Champ developers
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
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from pathlib import Path
from typing import Any, Dict, Union

from swisschamp.constants import SNAPSHOT_VERSION
from swisschamp.exceptions import (
    FileLoadException,
    FileSaveException,
    SnapshotException,
)
from swisschamp.models import TournamentState
from swisschamp.tournament.standings import recalculate_standings
from swisschamp.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def dump_state(state: TournamentState) -> Dict[str, Any]:
    """Snapshot dictionary including the format version."""
    data = state.to_dict()
    data["version"] = SNAPSHOT_VERSION
    return data


def load_state_from_dict(data: Dict[str, Any]) -> TournamentState:
    """Build a state from a snapshot dictionary of any supported version.

    Raises:
        SnapshotException: If the snapshot lacks data that cannot be defaulted
    """
    if not isinstance(data, dict):
        raise SnapshotException(f"Snapshot must be a JSON object, got {type(data).__name__}")
    version = data.get("version", 0)
    if version != SNAPSHOT_VERSION:
        logger.info("Migrating snapshot from version %s", version)
    return recalculate_standings(TournamentState.from_dict(data))


def save_state(state: TournamentState, path: PathLike) -> Path:
    """Write ``state`` to ``path`` as JSON and return the path."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(dump_state(state), f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise FileSaveException(f"Could not save championship to {path}: {e}") from e
    logger.debug("Saved championship %s to %s", state.season_id, path)
    return path


def load_state(path: PathLike) -> TournamentState:
    """Read a championship snapshot from ``path``.

    Raises:
        FileLoadException: If the file is missing or not valid JSON
        SnapshotException: If the JSON is not a usable snapshot
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Could not load championship from {path}: {e}") from e
    state = load_state_from_dict(data)
    logger.debug("Loaded championship %s from %s", state.season_id, path)
    return state
