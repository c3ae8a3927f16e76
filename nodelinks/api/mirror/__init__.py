"""Mirror latency probing, ranking and selection."""

from .._output_schemas.mirror import MirrorSelectOutput, MirrorSetOutput, MirrorTestOutput
from .ProbeResult import ProbeResult

__all__ = [
    "MirrorSelectOutput",
    "MirrorSetOutput",
    "MirrorTestOutput",
    "ProbeResult",
]
