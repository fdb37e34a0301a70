"""
Tests for the command line scripts: terminal client and application export.
"""
import csv
import io
import json

from scripts import browse_fixes
from scripts.export_applications import COLUMNS, export_applications

from app.database import SessionLocal
from app.services.access_gate import SHEET_URL
from app.services.access_store import AccessStore


def run(tmp_path, *argv):
    return browse_fixes.main(["--progress-file", str(tmp_path / "progress.json"), *argv])


class TestBrowseFixes:

    def test_catalog_locked_until_subscribed(self, tmp_path, capsys):
        assert run(tmp_path, "list", "--email", "a@x.com") == 1
        assert "has no access yet" in capsys.readouterr().err

    def test_subscribe_then_browse(self, tmp_path, capsys):
        assert run(tmp_path, "subscribe", "a@x.com") == 0
        assert "Welcome! You now have access to all 101 fixes." in capsys.readouterr().out

        assert run(tmp_path, "list", "--email", "a@x.com", "--search", "checkout") == 0
        out = capsys.readouterr().out
        assert "Checkout process too long" in out
        assert "2 fixes found" in out

    def test_subscribe_twice_welcomes_back(self, tmp_path, capsys):
        run(tmp_path, "subscribe", "a@x.com")
        capsys.readouterr()

        assert run(tmp_path, "subscribe", "a@x.com") == 0
        assert "Welcome back" in capsys.readouterr().out

    def test_set_progress_is_saved_locally(self, tmp_path, capsys):
        run(tmp_path, "subscribe", "a@x.com")

        assert run(tmp_path, "set", "--email", "a@x.com", "73", "Done") == 0
        assert "1/101 completed" in capsys.readouterr().out

        document = json.loads((tmp_path / "progress.json").read_text())
        assert document == {"fixProgress": {"73": "Done"}}

        assert run(tmp_path, "list", "--email", "a@x.com", "--progress", "Done") == 0
        assert "1 fixes found" in capsys.readouterr().out

    def test_show_unknown_fix(self, tmp_path, capsys):
        run(tmp_path, "subscribe", "a@x.com")
        assert run(tmp_path, "show", "--email", "a@x.com", "500") == 1
        assert "Unknown fix id" in capsys.readouterr().err

    def test_sheet(self, tmp_path, capsys):
        assert run(tmp_path, "sheet", "reader@x.com") == 0
        assert capsys.readouterr().out.strip().endswith(SHEET_URL)

    def test_apply(self, tmp_path, capsys):
        code = run(
            tmp_path, "apply",
            "--name", "Sam", "--brand", "Brand Co", "--store-url", "brand.com",
            "--ad-spend", "$0 to $2,000", "--email", "owner@brand.com",
        )
        assert code == 0
        assert "Application submitted!" in capsys.readouterr().out


class TestExportApplications:

    def test_writes_csv(self):
        db = SessionLocal()
        try:
            store = AccessStore(db)
            store.record_application("Sam", "Brand Co", "brand.com", "$0 to $2,000", "sam@brand.com")
            store.record_application("Ali", "Other Co", "https://other.com", "$10,001 and above", "ali@other.com")
        finally:
            db.close()

        out = io.StringIO()
        assert export_applications(out) == 2

        rows = list(csv.reader(io.StringIO(out.getvalue())))
        assert rows[0] == COLUMNS
        assert len(rows) == 3
        assert {row[5] for row in rows[1:]} == {"https://brand.com", "https://other.com"}

    def test_status_filter(self):
        db = SessionLocal()
        try:
            AccessStore(db).record_application("Sam", "Brand Co", "brand.com", "$0 to $2,000", "sam@brand.com")
        finally:
            db.close()

        assert export_applications(io.StringIO(), "accepted") == 0
        assert export_applications(io.StringIO(), "pending") == 1
