"""Ошибки синтаксиса e-mail адреса."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from mailsyntax.modules.constants import ERROR_PREFIX
from mailsyntax.modules.utils.ascii import AsciiError


class ErrorKind(Enum):
    """Нарушенное правило; значение служит описанием для сообщения."""

    NO_LOCAL_PART = "no local part"
    NO_DOMAIN_PART = "no domain part"
    NO_SIGN_AT = "no at sign (@)"

    TOO_AT = "wrong number of at sign (@)"
    LOCAL_TOO_LONG = "the local part has more than 64 characters"
    DOMAIN_TOO_LONG = "the domain part has more than 255 characters"
    LABEL_TOO_LONG = "a domain label has more than 63 characters"

    LOCAL_START_PERIOD = "the local part starts with a period"
    LOCAL_END_PERIOD = "the local part ends with a period"
    DOMAIN_START_PERIOD = "the domain part starts with a period"
    DOMAIN_END_PERIOD = "the domain part ends with a period"
    CONSECUTIVE_PERIOD = "appear two or more consecutive periods"
    NO_PERIOD_DOMAIN = "no period at domain part"

    NON_ASCII_OR_CONTROL = "character outside printable ASCII"
    WRONG_CHAR_LOCAL = "character not valid in local part"
    WRONG_CHAR_DOMAIN = "character not valid in domain part"
    WRONG_START_LABEL = "character not valid at start of domain label"
    WRONG_END_LABEL = "character not valid at end of domain label"


_CHAR_KINDS = frozenset(
    {
        ErrorKind.WRONG_CHAR_LOCAL,
        ErrorKind.WRONG_CHAR_DOMAIN,
        ErrorKind.WRONG_START_LABEL,
        ErrorKind.WRONG_END_LABEL,
    }
)


class AddressError(ValueError):
    """Адрес не прошёл проверку синтаксиса.

    ``kind`` указывает первое нарушенное правило. Для ошибок символов
    заполнено ``char``, для ``NON_ASCII_OR_CONTROL`` исходная ошибка
    сохраняется в ``detail``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        char: Optional[str] = None,
        detail: Optional[AsciiError] = None,
    ) -> None:
        if kind in _CHAR_KINDS and char is None:
            raise TypeError(f"{kind.name} требует указать символ.")
        if kind is ErrorKind.NON_ASCII_OR_CONTROL:
            if detail is None:
                raise TypeError("NON_ASCII_OR_CONTROL требует исходную AsciiError.")
            char = detail.char
        self.kind = kind
        self.char = char
        self.detail = detail
        # args совпадают с аргументами конструктора (copy, pickle).
        super().__init__(kind, char, detail)

    def __str__(self) -> str:
        return self.message

    @property
    def description(self) -> str:
        if self.detail is not None:
            return self.detail.description
        return self.kind.value

    @property
    def message(self) -> str:
        if self.char is not None:
            return f"{ERROR_PREFIX}: {self.description} ({self.char})"
        return f"{ERROR_PREFIX}: {self.description}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressError):
            return NotImplemented
        return (self.kind, self.char, self.detail) == (other.kind, other.char, other.detail)

    def __hash__(self) -> int:
        return hash((self.kind, self.char, self.detail))

    def __repr__(self) -> str:
        if self.detail is not None:
            return f"AddressError({self.kind.name}, {self.detail!r})"
        if self.char is not None:
            return f"AddressError({self.kind.name}, {self.char!r})"
        return f"AddressError({self.kind.name})"
