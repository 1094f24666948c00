"""
Exception classes raised by the exporter.

    ExportError
    ├── ConfigError
    ├── WorkbookOpenFailure
    ├── DirectoryCreationFailure
    ├── FileWriteFailure
    └── ModuleContentUnavailable

Empty worksheets and workbooks without a macro project are not errors: the
first is a grid with ``bounds is None``, the second a ``None`` macro project.
"""


class ExportError(Exception):
    """Base class for every error raised by ``xls_export``."""


class ConfigError(ExportError):
    """The YAML configuration file is unreadable or has unknown keys."""


class WorkbookOpenFailure(ExportError):
    """The input cannot be parsed as the selected container format."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot open workbook '{self.path}': {reason}")


class DirectoryCreationFailure(ExportError):
    """The export folder cannot be created."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot create export folder '{self.path}': {reason}")


class FileWriteFailure(ExportError):
    """An output file cannot be created or written."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot write '{self.path}': {reason}")


class ModuleContentUnavailable(ExportError, KeyError):
    """The source text of a macro module cannot be fetched."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Module '{self.name}' has no retrievable source text"
