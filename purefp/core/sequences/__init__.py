"""Lazy infinite sequences."""

from purefp.core.sequences.periodic import PeriodicSequence, periodic

__all__ = ["PeriodicSequence", "periodic"]
