from __future__ import annotations

import math
import re

"""Cell value model for TSV tables.

A Cell stores a single piece of text. When that text reads as a number the
Cell behaves like a number: it can be accumulated, compared and rendered with
a decimal comma. Text that does not read as a number passes through untouched
and arithmetic on it degrades quietly.

Storage invariants:
- the decimal separator stored internally is always a period
- numeric, non-exponential text has no trailing zeros after the decimal point
"""

__all__ = [
    "Cell",
    "CellValue",
    "is_numeric_text",
    "normalize_decimal_comma",
]

CellValue = int | float | str

# optional leading whitespace, sign, mantissa with optional period, exponent
# nothing may trail the number; ASCII digits and whitespace only
_NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def is_numeric_text(text: str) -> bool:
    """Return True when ``text`` is numeric text.

    The whole string must parse as a finite double. A value of exactly zero is
    rejected unless the text starts with a NUL character, so ``"0"`` and
    ``"0.0"`` are NOT numeric.
    """
    if not _NUMBER_RE.fullmatch(text):
        return False
    number = float(text)
    if not math.isfinite(number):
        return False
    return number != 0 or text.startswith("\0")


def normalize_decimal_comma(text: str) -> str | None:
    """Convert comma-decimal text to period form.

    Returns:
        ``text`` itself when already numeric, the period form when replacing
        commas yields numeric text, otherwise None.
    """
    if is_numeric_text(text):
        return text
    if "," not in text:
        return None
    candidate = text.replace(",", ".")
    if not is_numeric_text(candidate):
        return None
    return candidate


def _format_float(number: float) -> str:
    # fixed six-decimal rendering, cleaned up afterwards
    return f"{number:f}"


def _operand_as_float(value: int | float) -> float | None:
    # ints beyond the float range cannot take part in arithmetic
    try:
        return float(value)
    except OverflowError:
        return None


def _strip_extra_zeros(text: str) -> str:
    if not is_numeric_text(text):
        return text
    if "e" in text.lower() or "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


class Cell:
    """A single TSV value, stored as text but usable as a number.

    Construct from an ``int``, a ``float`` or a ``str`` (another Cell copies
    its text). Mutating operations never raise on non-numeric content.
    """

    __slots__ = ("value",)

    def __init__(self, value: CellValue | Cell = "") -> None:
        self.value = ""
        self.replace(value)

    # ---- inspection -------------------------------------------------

    def is_number(self) -> bool:
        return is_numeric_text(self.value)

    def get_number(self) -> int:
        """Truncated integer value, or 0 for non-numeric text."""
        if self.is_number():
            return int(float(self.value))
        return 0

    def get_precise_number(self) -> float:
        """Float value, or 0 for non-numeric text."""
        if self.is_number():
            return float(self.value)
        return 0.0

    def get_string(self) -> str:
        """Display text: numeric values use a decimal comma."""
        if self.is_number():
            return self.value.replace(".", ",")
        return self.value

    # ---- mutation ---------------------------------------------------

    def replace(self, value: CellValue | Cell) -> None:
        """Overwrite the stored value using the construction rules."""
        if isinstance(value, Cell):
            self.value = value.value
        elif isinstance(value, int):
            self.value = str(int(value))
        elif isinstance(value, float):
            self.value = _strip_extra_zeros(_format_float(value))
        elif isinstance(value, str):
            normalized = normalize_decimal_comma(value)
            self.value = _strip_extra_zeros(normalized if normalized is not None else value)
        else:
            raise TypeError(f"unsupported cell value type: {type(value).__name__}")

    def add(self, value: CellValue | Cell) -> None:
        """Accumulate ``value`` into the cell.

        Numeric operands are added only when the cell is numeric. A string
        operand that is not number-like (or any string added to a text cell)
        is appended to the stored text instead, and the joined text goes
        through the construction rules again. A Cell operand counts as its
        stored text.
        """
        if isinstance(value, Cell):
            value = value.value
        if isinstance(value, str):
            operand = normalize_decimal_comma(value)
            if self.is_number() and operand is not None:
                self._store_number(float(self.value) + float(operand))
            else:
                self.replace(self.value + value)
            return
        if self.is_number():
            operand = _operand_as_float(value)
            if operand is not None:
                self._store_number(float(self.value) + operand)

    def subtract(self, value: CellValue | Cell) -> None:
        """Subtract ``value``; skipped when either side is not numeric."""
        if not self.is_number():
            return
        if isinstance(value, Cell):
            value = value.value
        if isinstance(value, str):
            operand = normalize_decimal_comma(value)
            if operand is None:
                return
            self._store_number(float(self.value) - float(operand))
            return
        number = _operand_as_float(value)
        if number is not None:
            self._store_number(float(self.value) - number)

    def _store_number(self, number: float) -> None:
        self.value = _strip_extra_zeros(_format_float(number))

    # ---- comparison -------------------------------------------------

    def equals(self, other: CellValue | Cell) -> bool:
        """Numbers compare by value, strings and Cells by raw stored text."""
        if isinstance(other, Cell):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        if isinstance(other, (int, float)):
            return self.is_number() and float(self.value) == other
        return False

    def copy(self) -> Cell:
        return Cell(self)

    # ---- operators --------------------------------------------------

    def __iadd__(self, value: CellValue | Cell) -> Cell:
        self.add(value)
        return self

    def __isub__(self, value: CellValue | Cell) -> Cell:
        self.subtract(value)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Cell, int, float, str)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.get_string()

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"
