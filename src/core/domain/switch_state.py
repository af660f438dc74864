"""
SwitchSnapshot — Снапшот состояния булевого переключателя

Immutable Pydantic модель, представляющая мгновенное чтение переключателя.
Полная совместимость с JSON Schema (contracts/schema/switch_snapshot.json).
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SwitchKind(str, Enum):
    """
    Тип переключателя.

    ATOMIC: потокобезопасный (AtomicSwitch, линеаризуемые операции)
    PLAIN: обычное поле, только для одного потока (PlainSwitch)
    """

    ATOMIC = "ATOMIC"
    PLAIN = "PLAIN"


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class SwitchSnapshot(BaseModel):
    """
    Снапшот переключателя на момент чтения.

    Immutable модель (frozen=True). Значение enabled — результат одного
    атомарного чтения для ATOMIC и обычного чтения поля для PLAIN.
    """

    name: str = Field(..., min_length=1, description="Имя переключателя")
    kind: SwitchKind = Field(..., description="Тип переключателя (ATOMIC/PLAIN)")
    enabled: bool = Field(..., description="Значение на момент снапшота")

    model_config = {"frozen": True}
