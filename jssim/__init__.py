"""JavaScript engine step simulator package."""

from .run import simulate, execute_program  # noqa: F401
from .api import (  # noqa: F401
    parse_source,
    dump_ast,
    trace_to_json,
    step_type_stats,
)
from .playback import StepPlayback  # noqa: F401
from .trace_types import Step, StepType, SimulationTrace  # noqa: F401
