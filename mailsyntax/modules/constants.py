"""Общие константы валидатора e-mail адресов."""

from __future__ import annotations

# RFC 5321, раздел 4.5.3.1: предельные размеры в октетах.
MAX_LOCAL_PART = 64
MAX_DOMAIN_PART = 255
MAX_LABEL = 63

# atom, RFC 5322 раздел 3.2.3 (без букв и цифр).
ATOM_PUNCTUATION = frozenset("!#$%&'*+-/=?^_`{|}~")

ERROR_PREFIX = "invalid email address"
