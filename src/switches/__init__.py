"""Switches — булевые переключатели.

- AtomicSwitch: потокобезопасный флаг с compare_and_set
- PlainSwitch: обычный флаг, только один поток
- send_message / query: булевые параметры, выбирающие ветку кода
"""

from .atomic_switch import AtomicSwitch
from .feature_params import query, send_message
from .plain_switch import PlainSwitch

__all__ = [
    "AtomicSwitch",
    "PlainSwitch",
    "send_message",
    "query",
]
