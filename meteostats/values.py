"""Cells holding a measurement together with the date it was recorded.

Extreme-value tables print them as ``"<number>(<date>)"``, e.g.
``"38.6(20170713)"``. The date is kept verbatim; some tables use a day of the
month, others a full date, and a few list several days.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from .errors import EmptyValue, MissingClosingParen, MissingDate, TrailingContent

T = TypeVar("T")


def decode_value_with_date(text: str) -> Tuple[float, str]:
    value_text, open_paren, rest = text.partition("(")
    if not open_paren:
        raise MissingDate(f"No date found in {text!r}")
    try:
        value = float(value_text)
    except ValueError as exc:
        raise EmptyValue(f"No value found in {text!r}") from exc
    if not math.isfinite(value):
        raise EmptyValue(f"No finite value found in {text!r}")
    date, close_paren, trailing = rest.partition(")")
    if not close_paren:
        raise MissingClosingParen(f"Unterminated date in {text!r}")
    if trailing:
        raise TrailingContent(f"Unexpected content after date in {text!r}")
    return value, date


@dataclass(frozen=True)
class ValueWithDate(Generic[T]):
    value: T
    date: str

    @classmethod
    def decode(
        cls, text: str, unit: Optional[Callable[[float], T]] = None
    ) -> "ValueWithDate[T]":
        value, date = decode_value_with_date(text)
        if unit is None:
            return cls(value=value, date=date)  # type: ignore[arg-type]
        return cls(value=unit(value), date=date)

    def encode(self) -> str:
        return f"{float(self.value)!r}({self.date})"  # type: ignore[arg-type]


__all__ = ["ValueWithDate", "decode_value_with_date"]
