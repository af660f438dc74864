"""AtomicSwitch — потокобезопасный булевый переключатель.

Общий для нескольких потоков флаг с операциями:
- set / clear: атомарная запись True / False, возвращает предыдущее значение
- compare_and_set: условная запись, единственный примитив координации
- get: атомарное чтение
- toggle: инверсия через цикл compare_and_set (без потерянных обновлений)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение всегда ровно True или False (вход приводится через bool())
2. Все операции линеаризуемы: существует общий порядок, согласованный
   с порядком программы каждого потока
3. Из двух потоков, одновременно вызвавших compare_and_set(False, True)
   на свежем экземпляре, успешен ровно один
4. Ни одна операция не бросает исключений и не ждёт внешних ресурсов

Критическая секция — чтение/сравнение/запись одного поля под приватным
threading.Lock. Внутри секции нет логирования и пользовательского кода.
"""

import threading
from typing import Optional

from src.core.domain.switch_state import SwitchKind, SwitchSnapshot


class AtomicSwitch:
    """Потокобезопасный булевый переключатель (линеаризуемый).

    Экземпляр создаётся владельцем с явным начальным значением и передаётся
    остальным компонентам по ссылке. Модульных глобальных экземпляров нет.

    Пример гонки за переход False → True:

        >>> switch = AtomicSwitch()
        >>> switch.compare_and_set(False, True)
        True
        >>> switch.compare_and_set(False, True)
        False
    """

    def __init__(self, initial: bool = False, name: Optional[str] = None):
        """
        Args:
            initial: начальное значение (по умолчанию False)
            name: имя для снапшотов и repr
        """
        self._value: bool = bool(initial)
        self._lock = threading.Lock()
        self.name = name or "atomic"

    def get(self) -> bool:
        """Атомарное чтение текущего значения."""
        with self._lock:
            return self._value

    def get_and_set(self, value: bool) -> bool:
        """Атомарный обмен значения.

        Args:
            value: новое значение

        Returns:
            значение непосредственно перед записью
        """
        new_value = bool(value)
        with self._lock:
            previous = self._value
            self._value = new_value
        return previous

    def set(self) -> bool:
        """Атомарная запись True. Возвращает предыдущее значение."""
        return self.get_and_set(True)

    def clear(self) -> bool:
        """Атомарная запись False. Возвращает предыдущее значение."""
        return self.get_and_set(False)

    def compare_and_set(self, expected: bool, update: bool) -> bool:
        """Атомарно записать update, только если текущее значение == expected.

        Промах не меняет состояние и возвращает False: вызывающий решает,
        повторить попытку или считать, что переход уже выполнил другой поток.

        Args:
            expected: ожидаемое текущее значение
            update: значение для записи

        Returns:
            True если запись произошла
        """
        expected = bool(expected)
        update = bool(update)
        with self._lock:
            if self._value != expected:
                return False
            self._value = update
            return True

    def toggle(self) -> bool:
        """Атомарная инверсия через цикл compare_and_set.

        Не read-then-write: при конкурентных вызовах ни одна инверсия
        не теряется, итоговая чётность определяется числом вызовов.

        Returns:
            значение до инверсии
        """
        while True:
            current = self.get()
            if self.compare_and_set(current, not current):
                return current

    def snapshot(self) -> SwitchSnapshot:
        """Снапшот текущего значения (одно атомарное чтение)."""
        return SwitchSnapshot(name=self.name, kind=SwitchKind.ATOMIC, enabled=self.get())

    def __repr__(self) -> str:
        return f"AtomicSwitch(name={self.name!r}, value={self.get()})"
