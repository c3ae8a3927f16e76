"""Registry catalog API domain."""

from .._output_schemas.registry import RegistryListOutput
from .Mirror import Mirror
from .RegistryCatalog import RegistryCatalog
from .ResolvedTarget import ResolvedTarget
from .TargetKind import TargetKind

__all__ = [
    "Mirror",
    "RegistryCatalog",
    "RegistryListOutput",
    "ResolvedTarget",
    "TargetKind",
]
