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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
SNAPSHOT_VERSION = 1

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Outcome codes stored on a pairing (from the first-move side's perspective)
OUTCOME_FIRST_WINS = "first-wins"
OUTCOME_SECOND_WINS = "second-wins"
OUTCOME_DRAW = "draw"
OUTCOMES = (OUTCOME_FIRST_WINS, OUTCOME_SECOND_WINS, OUTCOME_DRAW)

# Older snapshots stored results as score strings
LEGACY_RESULT_CODES = {
    "1-0": OUTCOME_FIRST_WINS,
    "0-1": OUTCOME_SECOND_WINS,
    "1/2-1/2": OUTCOME_DRAW,
    "0.5-0.5": OUTCOME_DRAW,
}

# Human results as reported by whatever plays the actual game
RESULT_WIN = "win"
RESULT_LOSS = "loss"
RESULT_DRAW = "draw"
HUMAN_RESULTS = (RESULT_WIN, RESULT_LOSS, RESULT_DRAW)

# Rating model
ELO_SCALE = 400.0
DRAW_BASELINE = 0.08
DRAW_CLOSE_BONUS = 0.06
DRAW_GAP_SPAN = 600.0
DRAW_MIN_PROBABILITY = 0.06
DRAW_MAX_PROBABILITY = 0.16

# Greedy pairing weights
REPEAT_PENALTY = -1000.0
SCORE_GROUP_WEIGHT = 100.0
RATING_WEIGHT = 0.01

# Tournament defaults
DEFAULT_TOTAL_ROUNDS = 7
DEFAULT_TOTAL_PLAYERS = 40
HUMAN_GLYPH = "\U0001f9d1‍\U0001f4bb"
BOT_ID_PREFIX = "champ-bot"
SEASON_ID_PREFIX = "season"

# Field generation: (low, high) rating band and share of the synthetic field
TIER_LOW_BAND = (100, 499)
TIER_MID_BAND = (500, 899)
TIER_HIGH_BAND = (900, 1500)
TIER_LOW_SHARE = 0.35
TIER_MID_SHARE = 0.35
RATING_JITTER = 60.0

# Opponent profile for the game engine
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10
DIFFICULTY_RATING_FLOOR = 100
DIFFICULTY_RATING_SPAN = 1400
HUE_STEP = 37

# Leaderboard
DEFAULT_LEADERBOARD_SIZE = 10
