"""
Domain models and value objects.

Contains switch snapshots and the grade scale.
"""

from src.core.domain.grade import (
    DEFAULT_A_MIN,
    DEFAULT_B_MIN,
    DEFAULT_C_MIN,
    DEFAULT_D_MIN,
    Grade,
    GradeScale,
)
from src.core.domain.switch_state import SwitchKind, SwitchSnapshot

__all__ = [
    # Switch snapshot
    "SwitchKind",
    "SwitchSnapshot",
    # Grade scale
    "Grade",
    "GradeScale",
    "DEFAULT_A_MIN",
    "DEFAULT_B_MIN",
    "DEFAULT_C_MIN",
    "DEFAULT_D_MIN",
]
