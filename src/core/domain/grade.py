"""
Grade — Буквенная оценка и шкала перевода баллов

Immutable Pydantic модель шкалы: нижние границы (включительно) для A/B/C/D.
Всё ниже границы D — оценка E.
Полная совместимость с JSON Schema (contracts/schema/grade_scale.json).
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ГРАНИЦЫ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_A_MIN: Final[int] = 90
DEFAULT_B_MIN: Final[int] = 80
DEFAULT_C_MIN: Final[int] = 70
DEFAULT_D_MIN: Final[int] = 60


# =============================================================================
# ENUMS
# =============================================================================


class Grade(str, Enum):
    """Буквенная оценка"""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


# =============================================================================
# GRADE SCALE MODEL
# =============================================================================


class GradeScale(BaseModel):
    """
    Шкала перевода балла в буквенную оценку.

    Границы строго убывают: a > b > c > d; NaN и бесконечности запрещены.
    Верхней границы нет (балл выше 100 — тоже A), нижней тоже нет
    (отрицательный балл — E).
    """

    a: float = Field(DEFAULT_A_MIN, allow_inf_nan=False, description="Минимальный балл для A")
    b: float = Field(DEFAULT_B_MIN, allow_inf_nan=False, description="Минимальный балл для B")
    c: float = Field(DEFAULT_C_MIN, allow_inf_nan=False, description="Минимальный балл для C")
    d: float = Field(DEFAULT_D_MIN, allow_inf_nan=False, description="Минимальный балл для D")

    model_config = {"frozen": True}

    @field_validator("b")
    @classmethod
    def validate_b(cls, v: float, info) -> float:
        """Проверка b < a"""
        if "a" in info.data and v >= info.data["a"]:
            raise ValueError(f"b {v} must be < a {info.data['a']}")
        return v

    @field_validator("c")
    @classmethod
    def validate_c(cls, v: float, info) -> float:
        """Проверка c < b"""
        if "b" in info.data and v >= info.data["b"]:
            raise ValueError(f"c {v} must be < b {info.data['b']}")
        return v

    @field_validator("d")
    @classmethod
    def validate_d(cls, v: float, info) -> float:
        """Проверка d < c"""
        if "c" in info.data and v >= info.data["c"]:
            raise ValueError(f"d {v} must be < c {info.data['c']}")
        return v
