"""End-to-end tests for the ``catalog product`` commands."""

import pytest
import structlog
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    yield tmp_path
    structlog.reset_defaults()


def _run(*args):
    return CliRunner().invoke(cli, ["--log-level", "ERROR", "product", *args])


class TestProductAdd:

    def test_add_product(self, data_dir):
        result = _run("add", "--name", "telefono", "--price", "0.5", "--stock", "9")

        assert result.exit_code == 0
        assert "Product #1 'telefono' added at $0.50 (stock 9)" in result.output
        assert (data_dir / "products.json").exists()

    def test_stock_out_of_range_fails(self):
        result = _run("add", "--name", "telefono", "--price", "0.5", "--stock", "21")

        assert result.exit_code == 1
        assert "Stock must be less than 20" in result.output

    def test_duplicate_name_fails(self):
        _run("add", "--name", "telefono", "--price", "0.5", "--stock", "9")

        result = _run("add", "--name", "telefono", "--price", "1", "--stock", "1")

        assert result.exit_code == 1
        assert "already exists" in result.output


class TestProductShow:

    def test_show_existing(self):
        _run("add", "--name", "telefono", "--price", "0.5", "--stock", "9")

        result = _run("show", "--id", "1")

        assert result.exit_code == 0
        assert "Name:  telefono" in result.output
        assert "Price: $0.50" in result.output
        assert "Stock: 9" in result.output

    def test_show_missing(self):
        result = _run("show", "--id", "88")

        assert result.exit_code == 1
        assert "not found" in result.output


class TestProductList:

    def test_empty(self):
        result = _run("list")

        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_lists_products(self):
        _run("add", "--name", "telefono", "--price", "0.5", "--stock", "9")
        _run("add", "--name", "cargador", "--price", "3.25", "--stock", "2")

        result = _run("list")

        assert result.exit_code == 0
        assert "telefono" in result.output
        assert "cargador" in result.output
        assert "$3.25" in result.output


class TestLoggingSettings:

    def test_json_log_lines_when_enabled(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_JSON", "true")
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "INFO")

        result = CliRunner().invoke(
            cli, ["product", "add", "--name", "telefono", "--price", "0.5", "--stock", "9"]
        )

        assert result.exit_code == 0
        assert '"event": "product.created"' in result.output

    def test_unknown_level_from_environment_is_a_usage_error(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "trace")

        result = CliRunner().invoke(cli, ["product", "list"])

        assert result.exit_code == 2
        assert "trace" in result.output
