"""Pairing data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from swisschamp.constants import (
    DRAW_SCORE,
    LEGACY_RESULT_CODES,
    LOSS_SCORE,
    OUTCOME_DRAW,
    OUTCOME_FIRST_WINS,
    OUTCOMES,
    WIN_SCORE,
)
from swisschamp.exceptions import InvalidResultException, SnapshotException
from swisschamp.type_hints import MaybeOutcome
from swisschamp.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Pairing:
    """One scheduled or completed board.

    Attributes
    ----------
    round_number : int
        Round the board belongs to (1-indexed).
    table : int
        Board number, 1..N within the round.
    first_id : str
        Participant playing first (White).
    second_id : str
        Participant playing second (Black).
    outcome : str or None
        ``"first-wins"``, ``"second-wins"``, ``"draw"``, or None while the
        game is undecided.
    """

    round_number: int
    table: int
    first_id: str
    second_id: str
    outcome: MaybeOutcome = None

    def __post_init__(self) -> None:
        if self.outcome is not None and self.outcome not in OUTCOMES:
            raise InvalidResultException(f"Unknown outcome code: {self.outcome!r}")

    @property
    def is_decided(self) -> bool:
        return self.outcome is not None

    def involves(self, participant_id: str) -> bool:
        return participant_id in (self.first_id, self.second_id)

    def opponent_of(self, participant_id: str) -> str:
        """Return the id of the other side of the board."""
        if participant_id == self.first_id:
            return self.second_id
        if participant_id == self.second_id:
            return self.first_id
        raise ValueError(
            f"{participant_id} does not play on table {self.table} "
            f"of round {self.round_number}"
        )

    def score_for(self, participant_id: str) -> Optional[float]:
        """Points earned by ``participant_id`` on this board, None if undecided."""
        if self.outcome is None:
            return None
        if self.outcome == OUTCOME_DRAW:
            return DRAW_SCORE
        first_won = self.outcome == OUTCOME_FIRST_WINS
        if participant_id == self.first_id:
            return WIN_SCORE if first_won else LOSS_SCORE
        if participant_id == self.second_id:
            return LOSS_SCORE if first_won else WIN_SCORE
        raise ValueError(f"{participant_id} does not play on table {self.table}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "round_number": self.round_number,
            "table": self.table,
            "first_id": self.first_id,
            "second_id": self.second_id,
            "outcome": self.outcome,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize a pairing.

        Accepts the older ``round``/``whiteId``/``blackId``/``result`` layout
        and maps its score strings ("1-0", "0-1", "1/2-1/2") to outcome codes.
        """
        if not isinstance(data, dict):
            raise SnapshotException(f"Pairing entry is not an object: {data!r}")
        first_id = data.get("first_id", data.get("whiteId"))
        second_id = data.get("second_id", data.get("blackId"))
        if first_id is None or second_id is None:
            raise SnapshotException(f"Pairing entry without both sides: {data!r}")
        try:
            round_number = int(data.get("round_number", data.get("round")))
            table = int(data["table"])
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotException(f"Malformed pairing entry {data!r}: {e}") from e
        raw_outcome = data.get("outcome", data.get("result"))
        try:
            outcome = normalize_outcome(raw_outcome)
        except InvalidResultException:
            logger.warning(
                "Round %s table %s: unknown stored result %r, treating as undecided",
                round_number,
                table,
                raw_outcome,
            )
            outcome = None

        return cls(
            round_number=round_number,
            table=table,
            first_id=str(first_id),
            second_id=str(second_id),
            outcome=outcome,
        )


def normalize_outcome(raw: Any) -> MaybeOutcome:
    """Map a stored outcome or legacy score string to an outcome code."""
    if raw is None or raw == "":
        return None
    if raw in OUTCOMES:
        return raw
    if isinstance(raw, str) and raw in LEGACY_RESULT_CODES:
        return LEGACY_RESULT_CODES[raw]
    raise InvalidResultException(f"Unknown stored result: {raw!r}")
