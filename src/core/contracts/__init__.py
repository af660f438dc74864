"""
Contract Validation Module

Модуль для валидации JSON контрактов: снапшоты переключателей и шкалы оценок.
"""

from .validators import (
    ContractValidator,
    GradeScaleValidator,
    SchemaLoader,
    SwitchSnapshotValidator,
    validate_grade_scale,
    validate_switch_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SwitchSnapshotValidator",
    "GradeScaleValidator",
    # Functions
    "validate_switch_snapshot",
    "validate_grade_scale",
]
