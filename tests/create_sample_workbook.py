"""
Create sample workbooks for testing the exporter.

The sample workbook has:
- Sheet1: a dense 2x2 block (labels then numbers)
- Sheet2: no cells at all
- Offset: a single value away from A1
- Types: one cell per value type
"""

import datetime
import os

from openpyxl import Workbook


def create_sample_workbook(output_path):
    """Create a multi-sheet workbook covering dense, empty, offset and typed sheets."""
    wb = Workbook()

    # ---- Sheet1: dense block ----
    ws1 = wb.active
    ws1.title = "Sheet1"
    ws1["A1"] = "x"
    ws1["B1"] = "y"
    ws1["A2"] = 1
    ws1["B2"] = 2

    # ---- Sheet2: empty ----
    wb.create_sheet("Sheet2")

    # ---- Offset: only C2 is filled ----
    ws3 = wb.create_sheet("Offset")
    ws3["C2"] = "z"

    # ---- Types ----
    ws4 = wb.create_sheet("Types")
    ws4["A1"] = "Hello"
    ws4["B1"] = 42
    ws4["C1"] = 2.5
    ws4["A2"] = True
    ws4["B2"] = False
    ws4["C2"] = datetime.datetime(2024, 1, 2, 3, 4, 5)

    wb.save(output_path)
    wb.close()
    return output_path


def create_two_sheet_workbook(output_path):
    """Workbook from the basic end-to-end scenario: Sheet1 filled, Sheet2 empty."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Sheet1"
    ws["A1"] = "x"
    ws["B1"] = "y"
    ws["A2"] = 1
    ws["B2"] = 2
    wb.create_sheet("Sheet2")
    wb.save(output_path)
    wb.close()
    return output_path


if __name__ == "__main__":
    path = os.path.join(os.path.dirname(__file__), "test_data", "sample.xlsx")
    os.makedirs(os.path.dirname(path), exist_ok=True)
    create_sample_workbook(path)
    print(f"Created: {path}")
