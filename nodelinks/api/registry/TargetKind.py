"""Kinds of mirror input resolution."""

from enum import Enum


class TargetKind(Enum):
    """What a raw mirror input resolved to."""

    ALL = "all"
    CUSTOM = "custom"
    ADDRESS = "address"
