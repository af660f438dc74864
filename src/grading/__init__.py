"""Grading — перевод числового балла в буквенную оценку A-E."""

from .letter_grade import DEFAULT_SCALE, GradeLookup, letter_grade, parse_score

__all__ = [
    "DEFAULT_SCALE",
    "GradeLookup",
    "letter_grade",
    "parse_score",
]
