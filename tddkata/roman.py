"""Conversion between Arabic and Roman numerals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RomanNumeral:
    value: int
    symbol: str


ALL_ROMAN_NUMERALS = (
    RomanNumeral(1000, "M"),
    RomanNumeral(900, "CM"),
    RomanNumeral(500, "D"),
    RomanNumeral(400, "CD"),
    RomanNumeral(100, "C"),
    RomanNumeral(90, "XC"),
    RomanNumeral(50, "L"),
    RomanNumeral(40, "XL"),
    RomanNumeral(10, "X"),
    RomanNumeral(9, "IX"),
    RomanNumeral(5, "V"),
    RomanNumeral(4, "IV"),
    RomanNumeral(1, "I"),
)


def convert_to_roman(arabic: int) -> str:
    """Return the Roman numeral for ``arabic``; zero or less gives ''."""
    parts = []
    for numeral in ALL_ROMAN_NUMERALS:
        count, arabic = divmod(arabic, numeral.value) if arabic > 0 else (0, arabic)
        parts.append(numeral.symbol * count)
    return "".join(parts)


def convert_to_arabic(roman: str) -> int:
    """Return the value of the Roman numeral ``roman``."""
    arabic = 0
    for numeral in ALL_ROMAN_NUMERALS:
        while roman.startswith(numeral.symbol):
            arabic += numeral.value
            roman = roman[len(numeral.symbol):]
    return arabic