"""Проверки символов по классам ASCII."""

from __future__ import annotations

from typing import Optional

# RFC 5321, раздел 4.1.2: запрещены октеты со старшим битом
# и управляющие символы (0-31, 127).
_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 126


class AsciiError(ValueError):
    """Строка содержит символ вне печатного диапазона ASCII."""

    def __init__(self, char: Optional[str] = None, position: Optional[int] = None) -> None:
        self.char = char
        self.position = position
        super().__init__(char, position)

    def __str__(self) -> str:
        return self.description

    @property
    def is_control(self) -> bool:
        return self.char is None

    @property
    def description(self) -> str:
        if self.is_control:
            return f"contains an ASCII control character at position {self.position}"
        return "contains a non-ASCII character"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AsciiError):
            return NotImplemented
        return (self.char, self.position) == (other.char, other.position)

    def __hash__(self) -> int:
        return hash((self.char, self.position))

    def __repr__(self) -> str:
        if self.is_control:
            return f"AsciiError(position={self.position})"
        return f"AsciiError(char={self.char!r})"


def is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def check_ascii_printable(value: str) -> None:
    """Ищет первый непечатный символ.

    Для символа вне ASCII сообщает сам символ, для управляющего символа
    сообщает его позицию (с единицы), так как он не отображается.
    """
    for position, ch in enumerate(value, start=1):
        code = ord(ch)
        if code > 127:
            raise AsciiError(char=ch)
        if code < _FIRST_PRINTABLE or code > _LAST_PRINTABLE:
            raise AsciiError(position=position)
