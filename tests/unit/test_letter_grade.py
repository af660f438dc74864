"""Тесты для перевода балла в буквенную оценку.

Coverage:
- Границы шкалы по умолчанию (90/80/70/60)
- Баллы вне 0-100
- Пользовательская шкала
- Некорректные входы (bool, NaN, inf, строки)
- parse_score
- GradeLookup.from_json_file
"""

import json
import math

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from src.core.domain import Grade, GradeScale
from src.grading import GradeLookup, letter_grade, parse_score


# =============================================================================
# DEFAULT SCALE
# =============================================================================


@pytest.mark.parametrize(
    "score,expected",
    [
        (100, Grade.A),
        (90, Grade.A),
        (89, Grade.B),
        (80, Grade.B),
        (79, Grade.C),
        (70, Grade.C),
        (69, Grade.D),
        (60, Grade.D),
        (59, Grade.E),
        (0, Grade.E),
    ],
)
def test_default_scale_boundaries(score, expected):
    assert letter_grade(score) == expected


def test_score_above_100_is_a():
    assert letter_grade(105) == Grade.A


def test_negative_score_is_e():
    assert letter_grade(-5) == Grade.E


def test_float_scores():
    assert letter_grade(89.999) == Grade.B
    assert letter_grade(90.0) == Grade.A
    assert letter_grade(59.5) == Grade.E


def test_grade_value_is_letter():
    assert letter_grade(85).value == "B"


# =============================================================================
# INVALID INPUT
# =============================================================================


def test_bool_score_rejected():
    with pytest.raises(TypeError):
        letter_grade(True)


def test_string_score_rejected():
    with pytest.raises(TypeError):
        letter_grade("90")


def test_huge_int_scores():
    """Целые за пределами float: без OverflowError, без верхней границы."""
    assert letter_grade(10**400) == Grade.A
    assert letter_grade(-(10**400)) == Grade.E


@pytest.mark.parametrize("score", [math.nan, math.inf, -math.inf])
def test_non_finite_score_rejected(score):
    with pytest.raises(ValueError, match="finite"):
        letter_grade(score)


# =============================================================================
# CUSTOM SCALE
# =============================================================================


def test_custom_scale():
    scale = GradeScale(a=85, b=75, c=65, d=50)

    assert letter_grade(85, scale) == Grade.A
    assert letter_grade(84, scale) == Grade.B
    assert letter_grade(65, scale) == Grade.C
    assert letter_grade(50, scale) == Grade.D
    assert letter_grade(49, scale) == Grade.E


def test_grade_lookup_uses_scale():
    lookup = GradeLookup(GradeScale(a=95, b=85, c=75, d=65))
    assert lookup.lookup(90) == Grade.B
    assert GradeLookup().lookup(90) == Grade.A


# =============================================================================
# PARSE SCORE
# =============================================================================


@pytest.mark.parametrize("text,expected", [("85", 85), (" 42\n", 42), ("-3", -3), ("+7", 7)])
def test_parse_score(text, expected):
    assert parse_score(text) == expected


@pytest.mark.parametrize(
    "text", ["", "abc", "8.5", "0x10", "\n", "1_000", "\u0668\u0665", "+-1", "1 2"]
)
def test_parse_score_invalid(text):
    with pytest.raises(ValueError, match="invalid score"):
        parse_score(text)


# =============================================================================
# SCALE FILES
# =============================================================================


def test_from_json_file(tmp_path):
    path = tmp_path / "scale.json"
    path.write_text(json.dumps({"a": 93, "b": 85, "c": 77, "d": 70}), encoding="utf-8")

    lookup = GradeLookup.from_json_file(path)

    assert lookup.scale == GradeScale(a=93, b=85, c=77, d=70)
    assert lookup.lookup(92) == Grade.B


def test_from_json_file_schema_violation(tmp_path):
    path = tmp_path / "scale.json"
    path.write_text(json.dumps({"a": 90, "b": 80, "c": 70}), encoding="utf-8")

    with pytest.raises(SchemaValidationError):
        GradeLookup.from_json_file(path)


def test_from_json_file_non_descending(tmp_path):
    path = tmp_path / "scale.json"
    path.write_text(json.dumps({"a": 90, "b": 95, "c": 70, "d": 60}), encoding="utf-8")

    with pytest.raises(ValidationError):
        GradeLookup.from_json_file(path)


def test_from_json_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        GradeLookup.from_json_file(tmp_path / "missing.json")


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_from_json_file_non_finite_bound(tmp_path, constant):
    """json.load пропускает NaN/Infinity — их отклоняет GradeScale."""
    path = tmp_path / "scale.json"
    path.write_text(f'{{"a": {constant}, "b": 80, "c": 70, "d": 60}}', encoding="utf-8")

    with pytest.raises(ValidationError):
        GradeLookup.from_json_file(path)


@pytest.mark.parametrize("field", ["a", "b", "c", "d"])
def test_grade_scale_rejects_nan(field):
    bounds = {"a": 90, "b": 80, "c": 70, "d": 60}
    bounds[field] = math.nan

    with pytest.raises(ValidationError):
        GradeScale(**bounds)
