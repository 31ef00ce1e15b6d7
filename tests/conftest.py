"""Общие фикстуры для тестов."""

from typing import Iterator

import pytest

from mailsyntax.config import get_settings

ENV_KEYS = (
    "MAILSYNTAX_MAX_LOCAL_PART",
    "MAILSYNTAX_MAX_DOMAIN_PART",
    "MAILSYNTAX_MAX_LABEL",
)


@pytest.fixture(autouse=True)
def default_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Убирает переопределения лимитов и сбрасывает кэш настроек."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]
