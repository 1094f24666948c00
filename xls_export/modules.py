"""
Module classification and extraction.

Decides which macro modules of a workbook are exported and whether each
one is written as a class module (``.cls``) or a standard module
(``.bas``). Document modules (one per worksheet plus ``ThisWorkbook``)
are never exported.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from .errors import ModuleContentUnavailable

logger = logging.getLogger(__name__)

RESERVED_MODULE_NAME = "ThisWorkbook"

# A class module carries this attribute on a line of its own
CLASS_MARKER = "\nAttribute VB_Base"


class ModuleKind(Enum):
    STANDARD = "bas"
    CLASS = "cls"

    @property
    def extension(self) -> str:
        return self.value


@dataclass
class MacroProject:
    """Module name -> source text. ``None`` marks unreadable source."""
    modules: dict = field(default_factory=dict)

    def module_names(self) -> list:
        return list(self.modules)

    def get_module(self, name: str) -> str:
        source = self.modules.get(name)
        if source is None:
            raise ModuleContentUnavailable(name)
        return source

    def __len__(self):
        return len(self.modules)


@dataclass(frozen=True)
class ExtractedModule:
    name: str
    kind: ModuleKind
    content: str

    @property
    def filename(self) -> str:
        return f"{self.name}.{self.kind.extension}"


def classify_module(source: str) -> ModuleKind:
    if CLASS_MARKER in source:
        return ModuleKind.CLASS
    return ModuleKind.STANDARD


def exclusion_set(worksheet_names: Iterable[str]) -> set:
    """Names of document modules: every worksheet plus ``ThisWorkbook``."""
    excluded = set(worksheet_names)
    excluded.add(RESERVED_MODULE_NAME)
    return excluded


def extract_modules(project: Optional[MacroProject],
                    worksheet_names: Iterable[str]) -> list:
    """Return an ``ExtractedModule`` for each exportable module of *project*.

    Module names are matched exactly against *worksheet_names* and
    ``ThisWorkbook``. Modules whose source cannot be fetched are skipped.
    Source text is passed through untouched.
    """
    if project is None:
        return []

    excluded = exclusion_set(worksheet_names)
    extracted = []
    for name in project.module_names():
        if name in excluded:
            logger.debug(f"Skipping document module '{name}'")
            continue
        try:
            source = project.get_module(name)
        except ModuleContentUnavailable as exc:
            logger.debug(str(exc))
            continue
        module = ExtractedModule(name=name, kind=classify_module(source), content=source)
        extracted.append(module)
    return extracted
