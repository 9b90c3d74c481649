"""Rating model and field generation for synthetic entrants."""

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

from swisschamp.simulation.field_generator import (
    FieldGenerator,
    SkillTier,
    generate_field,
)
from swisschamp.simulation.rating_model import (
    ResultSimulator,
    draw_probability,
    expected_score,
    simulate_outcome,
)

__all__ = [
    "FieldGenerator",
    "ResultSimulator",
    "SkillTier",
    "draw_probability",
    "expected_score",
    "generate_field",
    "simulate_outcome",
]
