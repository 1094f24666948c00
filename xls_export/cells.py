"""
Cell Model
==========
A closed set of cell variants and the text each one renders to when a
worksheet is written out as delimited text.
"""

import datetime
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


class CellKind(Enum):
    EMPTY = "empty"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    ERROR = "error"


@dataclass(frozen=True)
class CellValue:
    """One typed cell value. ``value`` is ``None`` only for EMPTY."""
    kind: CellKind
    value: Any = None

    @classmethod
    def empty(cls):
        return cls(CellKind.EMPTY)

    @classmethod
    def string(cls, text: str):
        return cls(CellKind.STRING, text)

    @classmethod
    def integer(cls, number: int):
        return cls(CellKind.INTEGER, number)

    @classmethod
    def real(cls, number: float):
        return cls(CellKind.FLOAT, number)

    @classmethod
    def boolean(cls, flag: bool):
        return cls(CellKind.BOOLEAN, flag)

    @classmethod
    def timestamp(cls, moment):
        return cls(CellKind.DATETIME, moment)

    @classmethod
    def error(cls, token: str):
        return cls(CellKind.ERROR, token)

    @classmethod
    def from_python(cls, value: Any, is_error: bool = False) -> "CellValue":
        """Wrap a plain Python value as handed out by openpyxl.

        ``bool`` is checked before ``int`` because it is a subclass of it.
        """
        if value is None:
            return cls.empty()
        if is_error:
            return cls.error(str(value))
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.integer(value)
        if isinstance(value, float):
            return cls.real(value)
        if isinstance(value, (datetime.datetime, datetime.date,
                              datetime.time, datetime.timedelta)):
            return cls.timestamp(value)
        return cls.string(str(value))

    def render(self) -> str:
        return _RENDERERS[self.kind](self.value)


def _render_empty(_value) -> str:
    return ""


def _render_string(value) -> str:
    return value


def _render_integer(value) -> str:
    return str(value)


def _render_float(value) -> str:
    # 42.0 -> "42", 0.1 -> "0.1", 1e-05 -> "0.00001"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _render_boolean(value) -> str:
    return "true" if value else "false"


def _render_datetime(value) -> str:
    return str(value)


def _render_error(value) -> str:
    return value


_RENDERERS = {
    CellKind.EMPTY: _render_empty,
    CellKind.STRING: _render_string,
    CellKind.INTEGER: _render_integer,
    CellKind.FLOAT: _render_float,
    CellKind.BOOLEAN: _render_boolean,
    CellKind.DATETIME: _render_datetime,
    CellKind.ERROR: _render_error,
}


def render_cell(cell) -> str:
    """Render *cell* (a ``CellValue`` or ``None``) as text."""
    if cell is None:
        return ""
    return cell.render()
