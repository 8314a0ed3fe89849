"""Tests for spreadsheet building and export row mapping."""

import unittest
from datetime import date, datetime
from io import BytesIO

from openpyxl import load_workbook

from ministry_hub.core.database import SessionLocal
from ministry_hub.services import exports
from ministry_hub.services.excel import ExcelColumn, build_workbook, export_filename
from tests.support import add_church, add_member, add_minister, reset_database


class TestBuildWorkbook(unittest.TestCase):
    def test_header_row_is_bold_and_grey(self) -> None:
        columns = [ExcelColumn("ID", "id"), ExcelColumn("Name", "name"), ExcelColumn("When", "when")]
        rows = [{"id": 1, "name": "Missionary", "when": datetime(2026, 1, 2, 3, 4)}, {"id": 2, "name": None}]
        wb = load_workbook(BytesIO(build_workbook("Ministry Ranks", columns, rows)))
        ws = wb.active
        self.assertEqual(ws.title, "Ministry Ranks")
        self.assertEqual([c.value for c in ws[1]], ["ID", "Name", "When"])
        self.assertTrue(all(c.font.bold for c in ws[1]))
        self.assertEqual(ws["A1"].fill.fgColor.rgb, "FFE0E0E0")
        self.assertEqual(ws["B2"].value, "Missionary")
        self.assertIn(ws["B3"].value, (None, ""))
        self.assertEqual(ws.max_row, 3)

    def test_long_values_widen_columns(self) -> None:
        columns = [ExcelColumn("Name", "name")]
        content = build_workbook("Sheet", columns, [{"name": "x" * 40}])
        ws = load_workbook(BytesIO(content)).active
        self.assertEqual(ws.column_dimensions["A"].width, 42)

    def test_long_sheet_names_are_truncated(self) -> None:
        content = build_workbook("A very long sheet name that Excel would reject", [ExcelColumn("ID", "id")], [])
        self.assertEqual(len(load_workbook(BytesIO(content)).active.title), 31)

    def test_formula_like_text_is_stored_as_text(self) -> None:
        columns = [ExcelColumn("Name", "name"), ExcelColumn("Note", "note")]
        payload = '=HYPERLINK("http://evil.example","x")'
        rows = [
            {"name": payload, "note": "@SUM(A1)"},
            {"name": "+63 912 345 6789", "note": "-1+1"},
        ]
        ws = load_workbook(BytesIO(build_workbook("Contact", columns, rows))).active
        for ref in ("A2", "B2", "A3", "B3"):
            with self.subTest(cell=ref):
                self.assertEqual(ws[ref].data_type, "s")
        self.assertEqual(ws["A2"].value, payload)
        self.assertEqual(ws["B3"].value, "-1+1")

    def test_export_filename(self) -> None:
        self.assertEqual(export_filename("members", date(2026, 3, 4)), "members-export-2026-03-04.xlsx")


class TestExportRows(unittest.TestCase):
    def setUp(self) -> None:
        reset_database()
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()

    def test_church_rows_include_people_counts(self) -> None:
        busy = add_church(self.db, name="IRM Branch - Davao")
        empty = add_church(self.db, name="IRM Branch - Iloilo")
        add_member(self.db, busy.id)
        add_member(self.db, busy.id, first_name="Bea")
        add_minister(self.db, busy.id)
        rows = {r["name"]: r for r in exports.church_rows(self.db, [busy, empty])}
        self.assertEqual(rows["IRM Branch - Davao"]["member_count"], 2)
        self.assertEqual(rows["IRM Branch - Davao"]["minister_count"], 1)
        self.assertEqual(rows["IRM Branch - Davao"]["total_count"], 3)
        self.assertEqual(rows["IRM Branch - Iloilo"]["total_count"], 0)

    def test_member_rows_resolve_church_name(self) -> None:
        church = add_church(self.db, name="IRM Branch - Cebu")
        member = add_member(self.db, church.id, is_active=False)
        (row,) = exports.member_rows(self.db, [member])
        self.assertEqual(row["church_name"], "IRM Branch - Cebu")
        self.assertEqual(row["active"], "No")
        self.assertEqual(set(row), {c.key for c in exports.MEMBER_COLUMNS})

    def test_minister_rows_match_columns(self) -> None:
        church = add_church(self.db)
        (row,) = exports.minister_rows(self.db, [add_minister(self.db, church.id)])
        self.assertEqual(set(row), {c.key for c in exports.MINISTER_COLUMNS})


if __name__ == "__main__":
    unittest.main()
