"""Serializable view of a probe result."""

from typing import Any

from ..registry.RegistryCatalog import RegistryCatalog
from .ProbeResult import ProbeResult
from .rate_latency import rate_latency


def describe_result(result: ProbeResult, catalog: RegistryCatalog) -> dict[str, Any]:
    data = result.to_dict()
    data["name"] = catalog.name_for(result.target)
    data["rating"] = rate_latency(result.elapsed_ms) if result.elapsed_ms is not None else ""
    return data
