#!/usr/bin/env python
"""
xls-export - CLI entry point.

Exports every worksheet of a workbook as delimited text and every macro
module as a ``.bas``/``.cls`` source file.

Usage:
    xls-export -i book.xlsm -o out/
    xls-export -i book.xls -o out/ -d "," -x csv
    python -m xls_export.main -i book.xlsm -o out/ --config export.yaml
"""

import argparse
import logging
import sys

from xls_export.config import load_config
from xls_export.errors import ExportError
from xls_export.exporter import export_workbook


def setup_logging(level_str: str = "INFO"):
    """Configure logging."""
    level = getattr(logging, level_str.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description='Export worksheets and VBA modules of a workbook to text files'
    )
    parser.add_argument(
        '-i', '--xls-fname', required=True,
        help='Workbook file to open (.xls, .xlsx, .xlsm)'
    )
    parser.add_argument(
        '-o', '--export-folder', required=True,
        help='Folder receiving the exported files (created if missing)'
    )
    parser.add_argument(
        '-d', '--sheet-delimiter', default=None,
        help='Delimiter written after every sheet cell (default: tab)'
    )
    parser.add_argument(
        '-x', '--sheet-extension', default=None,
        help='Extension for sheet files, e.g. txt or csv (default: txt)'
    )
    parser.add_argument(
        '-c', '--config', default=None,
        help='Path to config YAML file'
    )
    parser.add_argument(
        '--log-level', type=str, default=None,
        help='Logging level: DEBUG, INFO, WARNING, ERROR'
    )
    parser.add_argument(
        '--keep-going', action='store_true',
        help='Keep exporting after a file cannot be written'
    )
    only = parser.add_mutually_exclusive_group()
    only.add_argument(
        '--sheets-only', action='store_true',
        help='Export worksheets only'
    )
    only.add_argument(
        '--modules-only', action='store_true',
        help='Export macro modules only'
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ExportError as exc:
        setup_logging()
        logging.getLogger(__name__).error(str(exc))
        sys.exit(1)

    # Apply command-line overrides
    sheet_delimiter = args.sheet_delimiter if args.sheet_delimiter is not None else config['sheet_delimiter']
    sheet_extension = args.sheet_extension if args.sheet_extension is not None else config['sheet_extension']
    export_sheets = config['export_sheets'] and not args.modules_only
    export_modules = config['export_modules'] and not args.sheets_only
    continue_on_error = args.keep_going or config['continue_on_error']
    log_level = args.log_level or config['log_level']

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    logger.info("Executing with following arguments:")
    logger.info(f"  xls_fname:     {args.xls_fname}")
    logger.info(f"  export_folder: {args.export_folder}")

    try:
        summary = export_workbook(
            args.xls_fname,
            args.export_folder,
            sheet_delimiter=sheet_delimiter,
            sheet_extension=sheet_extension,
            export_sheets_enabled=export_sheets,
            export_modules_enabled=export_modules,
            encoding=config['encoding'],
            continue_on_error=continue_on_error,
        )
    except ExportError as exc:
        logger.error(str(exc))
        sys.exit(1)

    logger.info("=" * 50)
    logger.info(f"Sheets exported:  {len(summary.sheet_files)} "
                f"({len(summary.empty_sheets)} empty skipped)")
    logger.info(f"Modules exported: {len(summary.module_files)}")
    if not summary.ok:
        logger.error(f"{len(summary.failures)} files could not be written")
        for failure in summary.failures:
            logger.error(f"  {failure.path}")
        sys.exit(1)


if __name__ == '__main__':
    main()
