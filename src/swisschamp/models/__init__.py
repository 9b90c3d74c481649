from swisschamp.models.config import ChampionshipConfig
from swisschamp.models.pairing import Pairing, normalize_outcome
from swisschamp.models.participant import Participant
from swisschamp.models.state import HumanProfile, TournamentState

__all__ = [
    "ChampionshipConfig",
    "HumanProfile",
    "Pairing",
    "Participant",
    "TournamentState",
    "normalize_outcome",
]
