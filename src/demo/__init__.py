"""Demo — CLI для демонстрации переключателей и поиска оценки."""

from .cli import DemoConfig, build_parser, main, run_grade, run_switches_demo

__all__ = [
    "DemoConfig",
    "build_parser",
    "main",
    "run_grade",
    "run_switches_demo",
]
