"""Letter grade — перевод числового балла в буквенную оценку.

Проверки диапазонов сверху вниз по шкале GradeScale:
- score >= a → A
- score >= b → B
- score >= c → C
- score >= d → D
- иначе → E

Шкала по умолчанию: 90 / 80 / 70 / 60.
"""

import json
import logging
import math
import re
from pathlib import Path
from typing import Union

from src.core.contracts.validators import validate_grade_scale
from src.core.domain.grade import Grade, GradeScale


logger = logging.getLogger(__name__)

Score = Union[int, float]

DEFAULT_SCALE = GradeScale()

# Как %d: необязательный знак и только ASCII-цифры
_SCORE_RE = re.compile(r"[+-]?[0-9]+")


def letter_grade(score: Score, scale: GradeScale = DEFAULT_SCALE) -> Grade:
    """Буквенная оценка для балла.

    Args:
        score: балл (int или float, без ограничений сверху и снизу)
        scale: шкала границ

    Returns:
        Grade

    Raises:
        TypeError: если score — bool или не число
        ValueError: если score — NaN или бесконечность
    """
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise TypeError(f"score must be int or float, got {type(score).__name__}")
    if isinstance(score, float) and not math.isfinite(score):
        raise ValueError(f"score must be finite, got {score}")

    if score >= scale.a:
        return Grade.A
    elif score >= scale.b:
        return Grade.B
    elif score >= scale.c:
        return Grade.C
    elif score >= scale.d:
        return Grade.D
    else:
        return Grade.E


def parse_score(text: str) -> int:
    """Разбор балла из строки ввода (десятичное целое, ASCII-цифры).

    Raises:
        ValueError: если строка не является целым числом
    """
    stripped = text.strip()
    if not _SCORE_RE.fullmatch(stripped):
        raise ValueError(f"invalid score: {text!r} (expected an integer)")
    return int(stripped, 10)


class GradeLookup:
    """Поиск оценки по фиксированной шкале."""

    def __init__(self, scale: GradeScale = DEFAULT_SCALE):
        self.scale = scale

    def lookup(self, score: Score) -> Grade:
        return letter_grade(score, self.scale)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "GradeLookup":
        """Загрузка шкалы из JSON файла.

        Сначала структура проверяется контрактом grade_scale,
        затем порядок границ — моделью GradeScale.

        Raises:
            FileNotFoundError: файл не найден
            json.JSONDecodeError: файл не является JSON
            jsonschema.ValidationError: нарушен контракт grade_scale
            pydantic.ValidationError: границы не убывают строго
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        validate_grade_scale(data)
        scale = GradeScale(**data)
        logger.info("Loaded grade scale from %s: %s", path, scale)
        return cls(scale)
