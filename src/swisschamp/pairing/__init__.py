from swisschamp.pairing.greedy_swiss import (
    already_played,
    create_greedy_swiss_pairings,
    generate_pairings_for_current_round,
    pairing_score,
)

__all__ = [
    "already_played",
    "create_greedy_swiss_pairings",
    "generate_pairings_for_current_round",
    "pairing_score",
]
