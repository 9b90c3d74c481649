"""Championship snapshot: the aggregate every engine function threads through."""

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

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from dateutil import parser as date_parser

from swisschamp.exceptions import (
    ParticipantNotFoundException,
    SnapshotException,
    TournamentStateException,
)
from swisschamp.models.pairing import Pairing
from swisschamp.models.participant import Participant
from swisschamp.utils import coerce_number, setup_logger

logger = setup_logger(__name__)


@dataclass
class HumanProfile:
    """The human entrant as supplied by the surrounding application."""

    id: str
    name: str
    rating: int


@dataclass
class TournamentState:
    """Complete snapshot of one championship.

    Engine functions never mutate a state they are given; they return a new
    one. Callers must treat the returned state as the only valid successor.

    Attributes
    ----------
    season_id : str
        Identifier of this run.
    current_round : int
        Round being played (1-indexed). Stays at ``total_rounds`` once the
        championship is completed.
    total_rounds : int
        Number of rounds, fixed at creation.
    participants : list of Participant
        Whole field, human included.
    pairings : list of Pairing
        Every board of every round generated so far.
    human_id : str
        Id of the human participant.
    started_at : datetime
        Creation time (timezone aware, UTC).
    completed : bool
        True once the final round is fully decided and advanced.
    """

    season_id: str
    current_round: int
    total_rounds: int
    participants: List[Participant]
    human_id: str
    pairings: List[Pairing] = field(default_factory=list)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed: bool = False

    def participant(self, participant_id: str) -> Participant:
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        raise ParticipantNotFoundException(f"No participant with id {participant_id}")

    @property
    def human(self) -> Participant:
        return self.participant(self.human_id)

    def participants_by_id(self) -> Dict[str, Participant]:
        return {p.id: p for p in self.participants}

    def pairings_for_round(self, round_number: int) -> List[Pairing]:
        return [p for p in self.pairings if p.round_number == round_number]

    @property
    def current_round_pairings(self) -> List[Pairing]:
        return self.pairings_for_round(self.current_round)

    def has_pairings_for_round(self, round_number: int) -> bool:
        return any(p.round_number == round_number for p in self.pairings)

    def validate(self) -> None:
        """Check the structural invariants of the snapshot.

        Raises
        ------
        TournamentStateException
            If ids repeat, the field does not hold exactly one human whose id
            matches ``human_id``, or the round counter is out of range.
        """
        ids = [p.id for p in self.participants]
        if len(set(ids)) != len(ids):
            raise TournamentStateException("Participant ids are not unique")
        humans = [p for p in self.participants if p.is_human]
        if len(humans) != 1:
            raise TournamentStateException(
                f"Expected exactly one human participant, found {len(humans)}"
            )
        if humans[0].id != self.human_id:
            raise TournamentStateException(
                f"human_id {self.human_id} does not match human participant "
                f"{humans[0].id}"
            )
        if not 1 <= self.current_round <= self.total_rounds + 1:
            raise TournamentStateException(
                f"current_round {self.current_round} outside 1..{self.total_rounds + 1}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the snapshot to a JSON-compatible dictionary."""
        return {
            "season_id": self.season_id,
            "current_round": self.current_round,
            "total_rounds": self.total_rounds,
            "participants": [p.to_dict() for p in self.participants],
            "pairings": [p.to_dict() for p in self.pairings],
            "human_id": self.human_id,
            "started_at": self.started_at.isoformat(),
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentState":
        """Deserialize a snapshot, defaulting fields older versions lacked.

        Missing ``started_at`` becomes now, missing ``completed`` becomes
        False, missing ``pairings`` becomes empty, an unusable current round
        becomes 1. A missing participant list, human id or total round count
        cannot be defaulted and raises SnapshotException.
        """
        raw_participants = data.get("participants", data.get("players"))
        if not isinstance(raw_participants, list):
            raise SnapshotException("Snapshot has no participant list")
        human_id = data.get("human_id", data.get("userId"))
        if human_id is None:
            raise SnapshotException("Snapshot has no human participant id")

        participants = [Participant.from_dict(p) for p in raw_participants]
        pairings = [Pairing.from_dict(p) for p in data.get("pairings") or []]
        raw_rounds = data.get("total_rounds", data.get("totalRounds"))
        try:
            total_rounds = int(raw_rounds)
        except (TypeError, ValueError, OverflowError) as e:
            raise SnapshotException(f"Unusable total round count {raw_rounds!r}") from e
        if total_rounds < 1:
            raise SnapshotException("Snapshot has no usable total round count")

        return cls(
            season_id=str(data.get("season_id", data.get("seasonId", "season-unknown"))),
            current_round=coerce_number(
                data.get("current_round", data.get("currentRound")), int, 1, "current round"
            ),
            total_rounds=total_rounds,
            participants=participants,
            pairings=pairings,
            human_id=str(human_id),
            started_at=parse_timestamp(data.get("started_at", data.get("startedAt"))),
            completed=bool(data.get("completed", False)),
        )


def parse_timestamp(raw: Any) -> datetime:
    """Parse an ISO-8601 string or epoch milliseconds; None means now."""
    if raw is None:
        return datetime.now(timezone.utc)
    if isinstance(raw, datetime):
        parsed = raw
    else:
        try:
            if isinstance(raw, (int, float)):
                parsed = datetime.fromtimestamp(raw / 1000.0, tz=timezone.utc)
            else:
                parsed = date_parser.isoparse(str(raw))
        except (ValueError, OverflowError, OSError):
            logger.warning("Unparseable start timestamp %r, using now", raw)
            return datetime.now(timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
