"""
Tests for the report script.
"""

import argparse
import json
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from report import main, report_to_json, snapshot_accessor, validate_workers

SNAPSHOT = {
    "fact_sales": [
        {
            "order_number": "SO1",
            "product_key": 1,
            "customer_key": 1,
            "order_date": "2013-01-05",
            "sales_amount": 40,
            "quantity": 2,
            "price": 20,
        }
    ],
    "dim_customers": [
        {"customer_key": 1, "first_name": "Ann", "birthdate": "1970-01-01", "country": "Germany"}
    ],
    "dim_products": [
        {"product_key": 1, "category": "Bikes", "subcategory": "Road", "product_name": "Road-1"}
    ],
}


@pytest.fixture
def snapshot_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "gold.json"
        path.write_text(json.dumps(SNAPSHOT))
        yield path


# =============================================================================
# Pure Functions
# =============================================================================


class TestSnapshotAccessor:
    def test_reads_labels(self, snapshot_path):
        accessor = snapshot_accessor(snapshot_path)
        assert accessor.count("fact_sales") == 1
        assert accessor.table_for("dim_products") == "dim_products"


class TestReportToJson:
    def test_payload(self, snapshot_path):
        from warehouse_explorer.measures import build_report

        payload = json.loads(report_to_json(build_report(accessor=snapshot_accessor(snapshot_path))))
        assert payload["complete"] is True
        assert payload["rows"][0] == {
            "measure_name": "Total Sales",
            "measure_value": 40,
            "error": None,
            "message": "",
        }


class TestValidateWorkers:
    def test_valid(self):
        assert validate_workers("4") == 4

    def test_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            validate_workers("0")


# =============================================================================
# CLI
# =============================================================================


class TestMain:
    def test_table_output(self, snapshot_path, capsys):
        assert main(["--snapshot", str(snapshot_path)]) == 0
        out = capsys.readouterr().out
        assert "Total Sales" in out
        assert "Total Customers" in out

    def test_extended_json(self, snapshot_path, capsys):
        assert main(["--snapshot", str(snapshot_path), "--extended", "--json", "--workers", "2"]) == 0
        payload = json.loads(capsys.readouterr().out)
        names = [row["measure_name"] for row in payload["rows"]]
        assert names[-1] == "Ordering Customers"

    def test_missing_snapshot(self, capsys):
        assert main(["--snapshot", "/nonexistent/gold.json"]) == 1
        assert "snapshot not found" in capsys.readouterr().out
