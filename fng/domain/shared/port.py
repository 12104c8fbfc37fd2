"""Marker base for domain ports."""

from typing import Protocol


class Port(Protocol):
    """Interface the domain depends on and infrastructure implements."""
