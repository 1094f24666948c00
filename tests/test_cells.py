"""Tests for the cell model and per-variant rendering."""

import datetime
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from xls_export.cells import CellKind, CellValue, render_cell


class TestFromPython(unittest.TestCase):
    def test_none_is_empty(self):
        self.assertEqual(CellValue.from_python(None).kind, CellKind.EMPTY)

    def test_bool_before_int(self):
        self.assertEqual(CellValue.from_python(True).kind, CellKind.BOOLEAN)
        self.assertEqual(CellValue.from_python(1).kind, CellKind.INTEGER)

    def test_float(self):
        self.assertEqual(CellValue.from_python(1.5).kind, CellKind.FLOAT)

    def test_dates(self):
        self.assertEqual(CellValue.from_python(datetime.date(2024, 1, 2)).kind, CellKind.DATETIME)
        self.assertEqual(CellValue.from_python(datetime.time(12, 0)).kind, CellKind.DATETIME)

    def test_error_flag(self):
        cell = CellValue.from_python("#DIV/0!", is_error=True)
        self.assertEqual(cell.kind, CellKind.ERROR)
        self.assertEqual(cell.value, "#DIV/0!")

    def test_string(self):
        self.assertEqual(CellValue.from_python("abc"), CellValue.string("abc"))

    def test_immutable(self):
        cell = CellValue.string("abc")
        with self.assertRaises(Exception):
            cell.value = "other"


class TestRender(unittest.TestCase):
    def test_string_verbatim(self):
        self.assertEqual(CellValue.string("  a\tb ").render(), "  a\tb ")

    def test_integer(self):
        self.assertEqual(CellValue.integer(42).render(), "42")
        self.assertEqual(CellValue.integer(-7).render(), "-7")

    def test_integral_float_has_no_fraction(self):
        self.assertEqual(CellValue.real(42.0).render(), "42")

    def test_float(self):
        self.assertEqual(CellValue.real(0.1).render(), "0.1")
        self.assertEqual(CellValue.real(2.5).render(), "2.5")

    def test_small_float_is_plain_decimal(self):
        self.assertEqual(CellValue.real(0.00001).render(), "0.00001")
        self.assertEqual(CellValue.real(-1.5e-07).render(), "-0.00000015")

    def test_boolean_tokens(self):
        self.assertEqual(CellValue.boolean(True).render(), "true")
        self.assertEqual(CellValue.boolean(False).render(), "false")

    def test_datetime(self):
        moment = datetime.datetime(2024, 1, 2, 3, 4, 5)
        self.assertEqual(CellValue.timestamp(moment).render(), "2024-01-02 03:04:05")

    def test_error_token(self):
        self.assertEqual(CellValue.error("#N/A").render(), "#N/A")

    def test_empty_and_missing(self):
        self.assertEqual(CellValue.empty().render(), "")
        self.assertEqual(render_cell(None), "")


if __name__ == "__main__":
    unittest.main()
