"""Type hints used in Swiss Champ."""

from typing import Callable, Literal, Optional, Tuple

# Outcome codes stored on a pairing
Outcome = Literal["first-wins", "second-wins", "draw"]
MaybeOutcome = Optional[Outcome]

# What the human reports after playing a game
HumanResult = Literal["win", "loss", "draw"]

# Returns a uniform value in [0, 1); random.random by default
RandomSource = Callable[[], float]

# Inclusive (low, high) rating band
RatingBand = Tuple[int, int]

# (first, second) participant ids of one board
MatchPairing = Tuple[str, str]
