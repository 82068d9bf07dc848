"""
Option algebra: tagged optional values, their append monoid and overlay.
"""

from purefp.core.algebra.option import (
    ABSENT,
    Absent,
    Label,
    Option,
    Present,
    combine,
    from_optional,
    is_present,
    mconcat,
    present,
    zip_combine,
)
from purefp.core.algebra.overlay import from_option, overlay

__all__ = [
    # Types
    "Option",
    "Label",
    "Present",
    "Absent",
    "ABSENT",
    # Constructors
    "present",
    "from_optional",
    "is_present",
    # Monoid
    "combine",
    "mconcat",
    "zip_combine",
    # Overlay
    "from_option",
    "overlay",
]
