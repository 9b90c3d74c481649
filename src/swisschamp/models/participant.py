"""Participant data class."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List

from swisschamp.exceptions import SnapshotException
from swisschamp.utils import coerce_number, setup_logger

logger = setup_logger(__name__)


@dataclass
class Participant:
    """One championship entrant, human or synthetic.

    Attributes
    ----------
    id : str
        Stable identifier.
    name : str
        Display name.
    glyph : str
        Flavour glyph shown next to the name.
    rating : int
        Playing strength, 100-3000 typical.
    is_human : bool
        True for the single human entrant.
    points : float
        Accumulated match points (derived by the standings calculator).
    tiebreak : float
        Buchholz score (derived by the standings calculator).
    opponents : list of str
        Ids of every participant already paired against this one. Kept as
        a list for stable ordering but never holds duplicates or the
        participant's own id.
    """

    id: str
    name: str
    glyph: str = ""
    rating: int = 0
    is_human: bool = False
    points: float = 0.0
    tiebreak: float = 0.0
    opponents: List[str] = field(default_factory=list)

    def has_played(self, other_id: str) -> bool:
        """Check if this participant has already been paired against ``other_id``."""
        return other_id in self.opponents

    def with_opponent(self, opponent_id: str) -> "Participant":
        """Return a copy with ``opponent_id`` added to the opponent set."""
        if opponent_id == self.id or opponent_id in self.opponents:
            return replace(self, opponents=list(self.opponents))
        return replace(self, opponents=[*self.opponents, opponent_id])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "glyph": self.glyph,
            "rating": self.rating,
            "is_human": self.is_human,
            "points": self.points,
            "tiebreak": self.tiebreak,
            "opponents": list(self.opponents),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize a participant, defaulting optional fields.

        Older snapshots used ``emoji``/``elo``/``isUser``/``buchholz`` keys and
        may lack ``opponents`` entirely; both are accepted.
        """
        if not isinstance(data, dict):
            raise SnapshotException(f"Participant entry is not an object: {data!r}")
        participant_id = data.get("id")
        if participant_id is None:
            raise SnapshotException(f"Participant entry without an id: {data!r}")
        participant_id = str(participant_id)

        return cls(
            id=participant_id,
            name=str(data.get("name", participant_id)),
            glyph=data.get("glyph", data.get("emoji", "")) or "",
            rating=coerce_number(
                data.get("rating", data.get("elo")), int, 0, f"rating of {participant_id}"
            ),
            is_human=bool(data.get("is_human", data.get("isUser", False))),
            points=coerce_number(
                data.get("points"), float, 0.0, f"points of {participant_id}"
            ),
            tiebreak=coerce_number(
                data.get("tiebreak", data.get("buchholz")),
                float,
                0.0,
                f"tiebreak of {participant_id}",
            ),
            opponents=_normalize_opponents(participant_id, data.get("opponents")),
        )


def _normalize_opponents(participant_id: str, raw: Any) -> List[str]:
    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            logger.warning(
                "Discarding malformed opponent list for %s: %r", participant_id, raw
            )
        return []
    return unique_ids(str(opp) for opp in raw if str(opp) != participant_id)


def unique_ids(ids: Iterable[str]) -> List[str]:
    """Drop duplicate ids while keeping first-seen order."""
    seen = set()
    result = []
    for item in ids:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
