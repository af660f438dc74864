"""PlainSwitch — обычный булевый флаг для однопоточного использования.

Никакой синхронизации: enable/disable/toggle — простые записи поля,
toggle — read-then-write. При конкурентном доступе возможны потерянные
обновления; для общего между потоками флага используется AtomicSwitch.

Поток-владелец запоминается при создании. Обращение из другого потока
не блокируется, но один раз логируется как WARNING.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

from src.core.domain.switch_state import SwitchKind, SwitchSnapshot


logger = logging.getLogger(__name__)


class PlainSwitch:
    """Однопоточный булевый флаг (по умолчанию выключен)."""

    def __init__(self, initial: bool = False, name: Optional[str] = None):
        self.enabled: bool = bool(initial)
        self.name = name or "plain"
        self._owner_thread_id = threading.get_ident()
        self._foreign_access_reported = False

    def enable(self) -> None:
        """Включить флаг."""
        self._check_owner("enable")
        self.enabled = True

    def disable(self) -> None:
        """Выключить флаг."""
        self._check_owner("disable")
        self.enabled = False

    def toggle(self) -> None:
        """Инвертировать флаг.

        НЕ атомарно: чтение и запись — две отдельные операции.
        Только для одного потока.
        """
        self._check_owner("toggle")
        self.enabled = not self.enabled

    def is_enabled(self) -> bool:
        """Текущее значение флага."""
        self._check_owner("is_enabled")
        return self.enabled

    def do_work(self, out: Optional[TextIO] = None) -> bool:
        """Выполнить бизнес-логику, если флаг включён.

        Args:
            out: поток вывода (по умолчанию sys.stdout)

        Returns:
            True если бизнес-логика выполнена
        """
        out = out or sys.stdout
        if self.is_enabled():
            print("[Simple flag] Switch is ON - executing business logic", file=out)
            return True
        print("[Simple flag] Switch is OFF - skipping business logic", file=out)
        return False

    def snapshot(self) -> SwitchSnapshot:
        """Снапшот текущего значения."""
        return SwitchSnapshot(name=self.name, kind=SwitchKind.PLAIN, enabled=self.is_enabled())

    def _check_owner(self, operation: str) -> None:
        if self._foreign_access_reported:
            return
        if threading.get_ident() != self._owner_thread_id:
            self._foreign_access_reported = True
            logger.warning(
                "PlainSwitch %r: %s called from a non-owner thread; "
                "use AtomicSwitch for shared flags",
                self.name,
                operation,
            )

    def __repr__(self) -> str:
        return f"PlainSwitch(name={self.name!r}, enabled={self.enabled})"
