"""Particle-disc collisions for studying return-type stability and performance."""

from ._batch import find_collisions as find_collisions
from ._batch import find_collisions_into as find_collisions_into
from ._batch import find_collisions_jax as find_collisions_jax
from ._collision import NO_COLLISION as NO_COLLISION
from ._collision import CollisionPoint as CollisionPoint
from ._collision import find_collision as find_collision
from ._collision import find_collision2 as find_collision2
from ._collision import find_collision_or_none as find_collision_or_none
from ._collision import is_collision as is_collision
from ._config import SweepParams as SweepParams
from ._config import SweepPreset as SweepPreset
from ._stability import TypeInstabilityError as TypeInstabilityError
from ._stability import check_type_stable as check_type_stable
from ._stability import count_traces as count_traces
from ._stability import is_type_stable as is_type_stable
from ._stability import return_types as return_types
from ._sweep import SweepResult as SweepResult
from ._sweep import sample_heights as sample_heights
from ._sweep import set_globals as set_globals
from ._sweep import sweep as sweep
from ._sweep import sweep_globals as sweep_globals
from ._sweep import sweep_vectorized as sweep_vectorized
from ._timing import ProfileEntry as ProfileEntry
from ._timing import Timer as Timer
from ._timing import TimingStats as TimingStats
from ._timing import peak_allocation as peak_allocation
from ._timing import profile_call as profile_call
from ._timing import time_call as time_call

__version__ = "0.0.0"
