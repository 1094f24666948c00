"""
Workbook Source
===============
Reads worksheet names, typed cell grids and the VBA project out of a
workbook file.

Two container formats are handled, picked by a plain suffix test on the
file name:

* ``ContainerFormat.LEGACY``  - names ending in ``xls``, read with xlrd.
* ``ContainerFormat.MODERN``  - everything else, read with openpyxl.

The VBA project is decoded by oletools for both formats.
"""

import logging
import os
import zipfile
from enum import Enum
from typing import Optional

import xlrd
from openpyxl import load_workbook
from openpyxl.chartsheet import Chartsheet
from openpyxl.utils.exceptions import InvalidFileException
from oletools.olevba import VBA_Parser, OlevbaBaseException
from xlrd.compdoc import CompDocError

from .cells import CellKind, CellValue
from .errors import WorkbookOpenFailure
from .grid import WorksheetGrid
from .modules import MacroProject

logger = logging.getLogger(__name__)


class ContainerFormat(Enum):
    LEGACY = "xls"
    MODERN = "xlsx"


def detect_container_format(path) -> ContainerFormat:
    """Pick the reader by suffix only (``foo.xls`` vs anything else)."""
    if str(path).endswith("xls"):
        return ContainerFormat.LEGACY
    return ContainerFormat.MODERN


# ---------------------------------------------------------------------------
# Legacy binary container (.xls) via xlrd
# ---------------------------------------------------------------------------

def cell_from_xlrd(cell, datemode: int) -> CellValue:
    """Convert one ``xlrd.sheet.Cell`` into a ``CellValue``."""
    ctype = cell.ctype
    if ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return CellValue.empty()
    if ctype == xlrd.XL_CELL_TEXT:
        return CellValue.string(cell.value)
    if ctype == xlrd.XL_CELL_NUMBER:
        return CellValue.real(float(cell.value))
    if ctype == xlrd.XL_CELL_BOOLEAN:
        return CellValue.boolean(bool(cell.value))
    if ctype == xlrd.XL_CELL_ERROR:
        token = xlrd.error_text_from_code.get(cell.value, f"#ERR{cell.value}")
        return CellValue.error(token)
    if ctype == xlrd.XL_CELL_DATE:
        try:
            moment = xlrd.xldate_as_datetime(cell.value, datemode)
        except xlrd.XLDateError:
            # Out-of-range serials keep their numeric form
            return CellValue.real(float(cell.value))
        return CellValue.timestamp(moment)
    return CellValue.string(str(cell.value))


class XlrdReader:
    """Reads ``.xls`` workbooks."""

    def __init__(self, path: str):
        try:
            self._book = xlrd.open_workbook(path, on_demand=True)
        except (xlrd.XLRDError, CompDocError, OSError) as exc:
            raise WorkbookOpenFailure(path, exc) from exc

    @property
    def sheet_names(self) -> list:
        return list(self._book.sheet_names())

    def read_grid(self, name: str) -> WorksheetGrid:
        sheet = self._book.sheet_by_name(name)
        cells = {}
        for row in range(sheet.nrows):
            for col in range(sheet.ncols):
                value = cell_from_xlrd(sheet.cell(row, col), self._book.datemode)
                if value.kind is not CellKind.EMPTY:
                    cells[(row, col)] = value
        self._book.unload_sheet(name)
        return WorksheetGrid.from_cells(name, cells)

    def close(self):
        self._book.release_resources()


# ---------------------------------------------------------------------------
# Zip/XML container (.xlsx, .xlsm) via openpyxl
# ---------------------------------------------------------------------------

class OpenpyxlReader:
    """Reads ``.xlsx``/``.xlsm`` workbooks using cached cell values."""

    def __init__(self, path: str):
        try:
            self._wb = load_workbook(path, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError,
                ValueError, OSError) as exc:
            raise WorkbookOpenFailure(path, exc) from exc

    @property
    def sheet_names(self) -> list:
        return list(self._wb.sheetnames)

    def read_grid(self, name: str) -> WorksheetGrid:
        ws = self._wb[name]
        if isinstance(ws, Chartsheet):
            return WorksheetGrid(name=name)
        cells = {}
        for row in ws.iter_rows():
            for cell in row:
                if cell.value is None:
                    continue
                cells[(cell.row - 1, cell.column - 1)] = CellValue.from_python(
                    cell.value, is_error=cell.data_type == "e")
        return WorksheetGrid.from_cells(name, cells)

    def close(self):
        self._wb.close()


_READERS = {
    ContainerFormat.LEGACY: XlrdReader,
    ContainerFormat.MODERN: OpenpyxlReader,
}


# ---------------------------------------------------------------------------
# VBA project via oletools
# ---------------------------------------------------------------------------

def read_macro_project(path: str) -> Optional[MacroProject]:
    """Return the workbook's macro project, or ``None`` if it has none.

    A project that oletools cannot decode is treated like a missing one.
    """
    try:
        parser = VBA_Parser(path)
    except (OlevbaBaseException, OSError) as exc:
        logger.info(f"No macro project in '{path}': {exc}")
        return None

    try:
        if not parser.detect_vba_macros():
            logger.info(f"No macro project in '{path}'")
            return None
        modules = {}
        for _fname, _stream, vba_filename, vba_code in parser.extract_macros():
            name = os.path.splitext(vba_filename)[0]
            modules[name] = vba_code
        return MacroProject(modules)
    except Exception as exc:  # decoding errors come from deep inside oletools
        logger.warning(f"Macro project in '{path}' could not be decoded: {exc}")
        logger.debug("oletools traceback", exc_info=True)
        return None
    finally:
        parser.close()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

class WorkbookSource:
    """An opened workbook together with the container format it was read as."""

    def __init__(self, path, container_format: ContainerFormat, reader):
        self.path = str(path)
        self.container_format = container_format
        self._reader = reader

    @property
    def sheet_names(self) -> list:
        return self._reader.sheet_names

    def read_grid(self, name: str) -> WorksheetGrid:
        return self._reader.read_grid(name)

    def read_macro_project(self) -> Optional[MacroProject]:
        return read_macro_project(self.path)

    def close(self):
        self._reader.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False


def open_workbook_source(path) -> WorkbookSource:
    """Open *path* with the reader matching its container format.

    Raises:
        WorkbookOpenFailure: the file cannot be parsed as that format.
    """
    container_format = detect_container_format(path)
    logger.debug(f"Opening '{path}' as {container_format.name} container")
    reader = _READERS[container_format](str(path))
    return WorkbookSource(path, container_format, reader)
