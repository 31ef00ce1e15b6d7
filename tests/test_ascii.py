"""Тесты проверки печатных символов ASCII."""

import copy
import pickle

import pytest

from mailsyntax.modules.utils.ascii import AsciiError, check_ascii_printable, is_digit, is_letter


def test_printable_ascii_passes() -> None:
    check_ascii_printable(" !~abcXYZ019@.")
    check_ascii_printable("")


def test_non_ascii_reports_character() -> None:
    with pytest.raises(AsciiError) as exc_info:
        check_ascii_printable("abcd€f")

    error = exc_info.value
    assert error.char == "€"
    assert error.position is None
    assert error.is_control is False
    assert str(error) == "contains a non-ASCII character"


@pytest.mark.parametrize(
    ("value", "position"),
    [("a\tbc", 2), ("abc@\texample.com", 5), ("\x00", 1), ("ab\x7f", 3)],
)
def test_control_character_reports_position(value: str, position: int) -> None:
    with pytest.raises(AsciiError) as exc_info:
        check_ascii_printable(value)

    error = exc_info.value
    assert error.char is None
    assert error.position == position
    assert error.is_control is True
    assert str(error) == f"contains an ASCII control character at position {position}"


def test_first_offending_character_wins() -> None:
    with pytest.raises(AsciiError) as exc_info:
        check_ascii_printable("a\nbé")
    assert exc_info.value == AsciiError(position=2)

    with pytest.raises(AsciiError) as exc_info:
        check_ascii_printable("aéb\n")
    assert exc_info.value == AsciiError(char="é")


def test_c1_controls_count_as_non_ascii() -> None:
    with pytest.raises(AsciiError) as exc_info:
        check_ascii_printable("a\x85")
    assert exc_info.value.char == "\x85"


def test_character_classes_are_ascii_only() -> None:
    assert all(is_letter(ch) for ch in "azAZ")
    assert all(is_digit(ch) for ch in "0123456789")
    assert not any(is_letter(ch) for ch in "09-_@éа")
    assert not any(is_digit(ch) for ch in "aZ-٣")


@pytest.mark.parametrize("error", [AsciiError(char="€"), AsciiError(position=4)])
def test_error_survives_copy_and_pickle(error: AsciiError) -> None:
    for restored in (copy.copy(error), pickle.loads(pickle.dumps(error))):
        assert restored == error
        assert str(restored) == str(error)
