"""Булевые параметры методов как переключатели функциональности.

Обычная параметризация: флаг, переданный вызывающим, выбирает одну
из двух веток кода. Состояния нет.
"""

import logging
import sys
from typing import Optional, TextIO


logger = logging.getLogger(__name__)


def send_message(message: str, debug_log: bool = False, out: Optional[TextIO] = None) -> str:
    """Отправка сообщения с опциональным debug-выводом.

    Args:
        message: текст сообщения
        debug_log: печатать ли строки [DEBUG] до и после отправки
        out: поток вывода (по умолчанию sys.stdout)

    Returns:
        отправленная строка
    """
    out = out or sys.stdout
    if debug_log:
        print(f"[DEBUG] Preparing to send message: {message}", file=out)

    # Имитация отправки
    sent = f"[SEND] {message}"
    print(sent, file=out)

    if debug_log:
        print("[DEBUG] Message sent successfully", file=out)
    return sent


def query(key: str, use_cache: bool = False, out: Optional[TextIO] = None) -> str:
    """Запрос данных: из кэша или из источника.

    Args:
        key: ключ
        use_cache: брать ли значение из кэша
        out: поток вывода (по умолчанию sys.stdout)

    Returns:
        "cached_<key>" или "db_<key>"
    """
    out = out or sys.stdout
    if use_cache:
        print(f"[Cache] Fetching from cache: {key}", file=out)
        return f"cached_{key}"

    logger.debug("cache bypassed for key=%s", key)
    print(f"[Database] Querying from database: {key}", file=out)
    return f"db_{key}"
