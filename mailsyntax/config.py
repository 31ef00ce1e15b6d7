"""Загрузка настроек валидатора из переменных окружения."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from mailsyntax.modules.constants import MAX_DOMAIN_PART, MAX_LABEL, MAX_LOCAL_PART

LOGGER = logging.getLogger("mailsyntax.config")


@dataclass(frozen=True)
class ValidatorSettings:
    """Предельные длины частей адреса."""

    max_local_part: int = MAX_LOCAL_PART
    max_domain_part: int = MAX_DOMAIN_PART
    max_label: int = MAX_LABEL

    def __post_init__(self) -> None:
        for name, ceiling in (
            ("max_local_part", MAX_LOCAL_PART),
            ("max_domain_part", MAX_DOMAIN_PART),
            ("max_label", MAX_LABEL),
        ):
            value = getattr(self, name)
            if not 0 < value <= ceiling:
                raise ValueError(f"{name} должен быть в диапазоне 1..{ceiling}, получено {value}.")


def _env(key: str, default: str = "") -> str:
    """Возвращает значение переменной окружения или значение по умолчанию."""
    return os.getenv(key, default).strip()


def _env_int(key: str, default: int) -> int:
    """Читает лимит; значение может только ужесточить RFC-предел ``default``."""
    value = _env(key)
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        LOGGER.warning("Некорректное значение %s=%r, используется %s.", key, value, default)
        return default
    if parsed <= 0:
        LOGGER.warning("Значение %s должно быть положительным, используется %s.", key, default)
        return default
    if parsed > default:
        LOGGER.warning("Значение %s=%s превышает предел RFC, используется %s.", key, parsed, default)
        return default
    return parsed


@lru_cache(maxsize=1)
def get_settings() -> ValidatorSettings:
    """Загружает настройки один раз и кэширует их для повторного использования."""
    return ValidatorSettings(
        max_local_part=_env_int("MAILSYNTAX_MAX_LOCAL_PART", MAX_LOCAL_PART),
        max_domain_part=_env_int("MAILSYNTAX_MAX_DOMAIN_PART", MAX_DOMAIN_PART),
        max_label=_env_int("MAILSYNTAX_MAX_LABEL", MAX_LABEL),
    )
