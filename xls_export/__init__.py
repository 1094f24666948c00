"""xls-export.

Dumps a workbook into plain files that diff well under version control:

  * every non-empty worksheet becomes ``<Sheet>.<ext>``, one line per row,
    each cell followed by the delimiter;
  * every VBA module that is not a document module becomes
    ``<Module>.cls`` (class modules) or ``<Module>.bas`` (everything else).
"""

from .exporter import ExportSummary, export_workbook
from .grid import WorksheetGrid, serialize_grid
from .modules import MacroProject, extract_modules, classify_module

__all__ = [
    "ExportSummary",
    "export_workbook",
    "WorksheetGrid",
    "serialize_grid",
    "MacroProject",
    "extract_modules",
    "classify_module",
]
