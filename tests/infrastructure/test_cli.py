"""End-to-end tests of the command line against a temporary data directory."""

import pytest
from click.testing import CliRunner

from ordercore.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


@pytest.fixture
def seeded(run):
    assert run("category", "add", "--name", "Hardware").exit_code == 0
    assert run(
        "product", "add", "--category", "1", "--name", "Widget",
        "--description", "A widget", "--price", "15.00", "--stock", "5",
    ).exit_code == 0
    assert run(
        "product", "add", "--category", "1", "--name", "Gadget",
        "--description", "A gadget", "--price", "2.50", "--stock", "10",
    ).exit_code == 0
    assert run(
        "customer", "add", "--first-name", "Ada", "--last-name", "Lovelace",
        "--email", "ada@example.com", "--password", "analytical-engine",
    ).exit_code == 0
    return run


class TestCatalogCommands:

    def test_category_add(self, run):
        result = run("category", "add", "--name", "Hardware")
        assert result.exit_code == 0
        assert "Category 1 added: Hardware" in result.output

    def test_category_list(self, run):
        run("category", "add", "--name", "Hardware")
        run("category", "add", "--name", "Garden")
        result = run("category", "list")
        assert result.exit_code == 0
        assert [line.split(maxsplit=1)[1] for line in result.output.splitlines()] == [
            "Hardware",
            "Garden",
        ]

    def test_product_add_requires_category(self, run):
        result = run(
            "product", "add", "--category", "3", "--name", "Widget",
            "--description", "A widget", "--price", "1.00",
        )
        assert result.exit_code == 1
        assert "Category 3 not found" in result.output

    def test_stock_show(self, seeded):
        result = seeded("stock", "show")
        assert result.exit_code == 0
        assert "Widget" in result.output
        assert "$15.00" in result.output

    def test_price_change(self, seeded):
        result = seeded("product", "price", "--id", "1", "--price", "18.00")
        assert result.exit_code == 0
        assert "now costs $18.00" in result.output


class TestOrderCommands:

    def test_place_and_show(self, seeded):
        result = seeded("order", "place", "--customer", "1", "--items", "1:3,2:2")
        assert result.exit_code == 0, result.output
        assert "Order #1 placed" in result.output
        assert "$50.00" in result.output

        shown = seeded("order", "show", "--id", "1")
        assert shown.exit_code == 0
        assert "$45.00" in shown.output

    def test_place_decrements_stock_on_disk(self, seeded):
        seeded("order", "place", "--customer", "1", "--items", "1:3")
        result = seeded("stock", "show")
        line = next(row for row in result.output.splitlines() if "Widget" in row)
        assert line.split()[-1] == "2"

    def test_oversell_rejected(self, seeded):
        result = seeded("order", "place", "--customer", "1", "--items", "2:1,1:6")
        assert result.exit_code == 1
        assert "Stock unavailable for product 1" in result.output
        assert "requested 6, available 5" in result.output

    def test_empty_order_rejected(self, seeded):
        result = seeded("order", "place", "--customer", "1")
        assert result.exit_code == 1
        assert "at least one item" in result.output

    def test_bad_item_format(self, seeded):
        result = seeded("order", "place", "--customer", "1", "--items", "Widget")
        assert result.exit_code == 2

    def test_unknown_order(self, run):
        result = run("order", "show", "--id", "9")
        assert result.exit_code == 1
        assert "Order #9 not found" in result.output


class TestSalesCommands:

    def test_sales_recorded_after_order(self, seeded):
        seeded("order", "place", "--customer", "1", "--items", "1:3,2:2")
        result = seeded("sales", "list", "--order", "1")
        assert result.exit_code == 0
        assert "$45.00" in result.output
        assert "$5.00" in result.output

    def test_replay_is_idempotent(self, seeded):
        seeded("order", "place", "--customer", "1", "--items", "1:1")
        result = seeded("sales", "project", "--all")
        assert result.exit_code == 0
        assert "0 sale record(s) added" in result.output

    def test_project_requires_target(self, seeded):
        result = seeded("sales", "project")
        assert result.exit_code == 2


class TestStorageErrors:

    def test_corrupt_store_reported_without_traceback(self, seeded, tmp_path):
        (tmp_path / "store.json").write_text("{not json", encoding="utf-8")
        result = seeded("sales", "list")
        assert result.exit_code == 1
        assert "Cannot read" in result.output
        assert isinstance(result.exception, SystemExit)

    def test_data_dir_below_a_file(self, tmp_path):
        blocker = tmp_path / "occupied"
        blocker.write_text("", encoding="utf-8")
        result = CliRunner().invoke(
            cli, ["--data-dir", str(blocker / "data"), "sales", "list"]
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot create data directory" in result.output
