"""
Domain models.

Serializable report models for the demonstrations.
"""

from purefp.core.domain.reports import FizzBuzzReport, MappingReport

__all__ = [
    "MappingReport",
    "FizzBuzzReport",
]
