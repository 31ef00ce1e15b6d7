"""Проверка синтаксиса e-mail адресов по правилам RFC 5321/5322/3696/1034."""

from __future__ import annotations

import logging
from typing import Optional

from mailsyntax.config import ValidatorSettings, get_settings
from mailsyntax.modules.constants import ATOM_PUNCTUATION
from mailsyntax.modules.errors import AddressError, ErrorKind
from mailsyntax.modules.utils.ascii import (
    AsciiError,
    check_ascii_printable,
    is_digit,
    is_letter,
)

LOGGER = logging.getLogger("mailsyntax.validator")


def is_valid(address: str, settings: Optional[ValidatorSettings] = None) -> bool:
    """Возвращает True, если адрес синтаксически корректен."""
    try:
        validate(address, settings)
    except AddressError:
        return False
    return True


def validate(address: str, settings: Optional[ValidatorSettings] = None) -> None:
    """Проверяет адрес и выбрасывает AddressError при первом нарушении.

    Порядок проверок фиксирован: одинаковый ввод всегда даёт одну и ту же
    ошибку. Адрес не нормализуется (регистр и пробелы сохраняются).
    """
    limits = settings or get_settings()
    try:
        _scan(address, limits)
    except AddressError as exc:
        LOGGER.debug("Адрес отклонён: %s", exc.kind.name)
        raise


def _scan(address: str, limits: ValidatorSettings) -> None:
    if address.startswith("@"):
        raise AddressError(ErrorKind.NO_LOCAL_PART)
    if address.endswith("@"):
        raise AddressError(ErrorKind.NO_DOMAIN_PART)

    try:
        check_ascii_printable(address)
    except AsciiError as exc:
        raise AddressError(ErrorKind.NON_ASCII_OR_CONTROL, detail=exc) from exc

    parts = address.split("@")
    if len(parts) == 1:
        raise AddressError(ErrorKind.NO_SIGN_AT)
    if len(parts) > 2:
        raise AddressError(ErrorKind.TOO_AT)
    local, domain = parts

    _check_local(local, limits)
    _check_domain(domain, limits)


def _check_local(local: str, limits: ValidatorSettings) -> None:
    # RFC 3696, раздел 3: точка не может начинать или завершать local part
    # и не может повторяться подряд.
    if len(local) > limits.max_local_part:
        raise AddressError(ErrorKind.LOCAL_TOO_LONG)
    if local.startswith("."):
        raise AddressError(ErrorKind.LOCAL_START_PERIOD)
    if local.endswith("."):
        raise AddressError(ErrorKind.LOCAL_END_PERIOD)

    last_period = False
    for ch in local:
        if ch == ".":
            if last_period:
                raise AddressError(ErrorKind.CONSECUTIVE_PERIOD)
            last_period = True
            continue
        if not (is_letter(ch) or is_digit(ch) or ch in ATOM_PUNCTUATION):
            raise AddressError(ErrorKind.WRONG_CHAR_LOCAL, ch)
        last_period = False


def _check_domain(domain: str, limits: ValidatorSettings) -> None:
    # RFC 1034, раздел 3.5: метка начинается с буквы, заканчивается буквой
    # или цифрой, внутри только буквы, цифры и дефис.
    if len(domain) > limits.max_domain_part:
        raise AddressError(ErrorKind.DOMAIN_TOO_LONG)
    if domain.startswith("."):
        raise AddressError(ErrorKind.DOMAIN_START_PERIOD)
    if domain.endswith("."):
        raise AddressError(ErrorKind.DOMAIN_END_PERIOD)

    labels = domain.split(".")
    if len(labels) == 1:
        raise AddressError(ErrorKind.NO_PERIOD_DOMAIN)

    for label in labels:
        _check_label(label, limits)


def _check_label(label: str, limits: ValidatorSettings) -> None:
    if not label:
        raise AddressError(ErrorKind.CONSECUTIVE_PERIOD)
    if len(label) > limits.max_label:
        raise AddressError(ErrorKind.LABEL_TOO_LONG)

    for ch in label:
        if not (is_letter(ch) or is_digit(ch) or ch == "-"):
            raise AddressError(ErrorKind.WRONG_CHAR_DOMAIN, ch)

    first, last = label[0], label[-1]
    if not is_letter(first):
        raise AddressError(ErrorKind.WRONG_START_LABEL, first)
    if not (is_letter(last) or is_digit(last)):
        raise AddressError(ErrorKind.WRONG_END_LABEL, last)
