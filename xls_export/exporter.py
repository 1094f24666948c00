"""
Export Orchestrator
===================
Drives a full export of one workbook into a folder:

  1. Create the export folder (and missing parents).
  2. Open the workbook with the reader matching its container format.
  3. Write one delimited text file per non-empty worksheet.
  4. Write one ``.bas``/``.cls`` file per exportable macro module.

By default the first failed file write aborts the run; files written so far
are left in place. With ``continue_on_error`` the failure is recorded in the
returned ``ExportSummary`` and the run carries on.
"""

import logging
import os
from dataclasses import dataclass, field

from .errors import DirectoryCreationFailure, FileWriteFailure
from .grid import DEFAULT_DELIMITER, serialize_grid
from .modules import extract_modules
from .workbook_source import open_workbook_source

logger = logging.getLogger(__name__)

DEFAULT_SHEET_EXTENSION = "txt"


@dataclass
class ExportSummary:
    """What an export run produced."""
    sheet_files: list = field(default_factory=list)
    module_files: list = field(default_factory=list)
    empty_sheets: list = field(default_factory=list)
    failures: list = field(default_factory=list)  # FileWriteFailure instances

    @property
    def ok(self) -> bool:
        return not self.failures


def ensure_export_folder(path) -> None:
    """Create *path* recursively if it does not exist yet."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationFailure(path, exc) from exc


def write_text_file(path, chunks, encoding: str = "utf-8") -> None:
    """Write *chunks* to *path* verbatim, without newline translation."""
    try:
        with open(path, "w", encoding=encoding, newline="") as f:
            for chunk in chunks:
                f.write(chunk)
    except (OSError, UnicodeError) as exc:
        raise FileWriteFailure(path, exc) from exc


def _write_or_record(path, chunks, summary, written, encoding, continue_on_error):
    try:
        write_text_file(path, chunks, encoding)
    except FileWriteFailure as exc:
        if not continue_on_error:
            raise
        logger.error(str(exc))
        summary.failures.append(exc)
        return
    written.append(path)
    logger.info(f"  Exported: {os.path.basename(path)}")


def export_sheets(source, export_folder, summary,
                  sheet_delimiter=DEFAULT_DELIMITER,
                  sheet_extension=DEFAULT_SHEET_EXTENSION,
                  encoding="utf-8", continue_on_error=False):
    """Write ``<SheetName>.<sheet_extension>`` for every non-empty sheet."""
    for name in source.sheet_names:
        grid = source.read_grid(name)
        if grid.is_empty:
            logger.debug(f"  Skipped empty sheet: {name}")
            summary.empty_sheets.append(name)
            continue
        path = os.path.join(export_folder, f"{name}.{sheet_extension}")
        _write_or_record(path, serialize_grid(grid, sheet_delimiter), summary,
                         summary.sheet_files, encoding, continue_on_error)


def export_modules(source, export_folder, summary,
                   encoding="utf-8", continue_on_error=False):
    """Write ``<ModuleName>.bas``/``.cls`` for every exportable module."""
    project = source.read_macro_project()
    if project is None:
        return
    logger.info(f"  Macro project with {len(project)} modules")
    for module in extract_modules(project, source.sheet_names):
        path = os.path.join(export_folder, module.filename)
        _write_or_record(path, [module.content], summary,
                         summary.module_files, encoding, continue_on_error)


def export_workbook(xls_fname, export_folder,
                    sheet_delimiter=DEFAULT_DELIMITER,
                    sheet_extension=DEFAULT_SHEET_EXTENSION,
                    export_sheets_enabled=True,
                    export_modules_enabled=True,
                    encoding="utf-8",
                    continue_on_error=False) -> ExportSummary:
    """Export worksheets and macro modules of *xls_fname* into *export_folder*.

    Raises:
        DirectoryCreationFailure: *export_folder* cannot be created.
        WorkbookOpenFailure: *xls_fname* cannot be opened.
        FileWriteFailure: an output file cannot be written and
            *continue_on_error* is false.
    """
    ensure_export_folder(export_folder)
    summary = ExportSummary()

    with open_workbook_source(xls_fname) as source:
        logger.info(f"Opened {source.container_format.name.lower()} workbook "
                    f"with {len(source.sheet_names)} sheets")
        if export_sheets_enabled:
            logger.info("Exporting sheets...")
            export_sheets(source, export_folder, summary,
                          sheet_delimiter=sheet_delimiter,
                          sheet_extension=sheet_extension,
                          encoding=encoding,
                          continue_on_error=continue_on_error)
        if export_modules_enabled:
            logger.info("Exporting macro modules...")
            export_modules(source, export_folder, summary,
                           encoding=encoding,
                           continue_on_error=continue_on_error)

    return summary
