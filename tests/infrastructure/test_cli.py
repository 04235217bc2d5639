"""Tests for the click command line, run through CliRunner."""

import json

import pytest
from click.testing import CliRunner

from shopql.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


def _cart_id(output: str) -> str:
    # "Cart <id> created."
    return output.split()[1]


def test_product_add_and_list(run):
    result = run("product", "add", "--id", "p1", "--name", "Widget", "--price", "10")
    assert result.exit_code == 0, result.output
    assert "Product p1 'Widget' added at 10" in result.output

    result = run("product", "list")
    assert result.exit_code == 0
    assert "Widget" in result.output


def test_product_list_empty(run):
    result = run("product", "list")
    assert "No products found." in result.output


def test_product_show_missing(run):
    result = run("product", "show", "--id", "nope")
    assert result.exit_code != 0
    assert "Cannot find product 'nope'" in result.output


def test_product_delete(run):
    run("product", "add", "--id", "p1", "--name", "Widget", "--price", "10")
    result = run("product", "delete", "--id", "p1")
    assert result.exit_code == 0
    assert "Product p1 deleted." in result.output


def test_cart_flow(run):
    run("product", "add", "--id", "p1", "--name", "Widget", "--price", "10")
    created = run("cart", "create")
    assert created.exit_code == 0
    cart_id = _cart_id(created.output)

    run("cart", "add", "--id", cart_id, "--product", "p1")
    result = run("cart", "add", "--id", cart_id, "--product", "p1")
    assert result.exit_code == 0
    assert "Widget" in result.output
    assert "20" in result.output

    result = run("cart", "remove", "--id", cart_id, "--item", "p1")
    assert result.exit_code == 0

    result = run("cart", "delete", "--id", cart_id)
    assert f"Cart {cart_id} deleted." in result.output

    result = run("cart", "show", "--id", cart_id)
    assert result.exit_code != 0
    assert "Cannot find cart" in result.output


def test_cart_remove_absent_item(run):
    cart_id = _cart_id(run("cart", "create").output)
    result = run("cart", "remove", "--id", cart_id, "--item", "p1")
    assert result.exit_code != 0
    assert "does not exist in cart" in result.output


def test_query_command(run):
    run("product", "add", "--id", "p1", "--name", "Widget", "--price", "10")
    result = run(
        "query",
        "query($id: ID!) { getProduct(productId: $id) { id name price } }",
        "--variables",
        '{"id": "p1"}',
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "data": {"getProduct": {"id": "p1", "name": "Widget", "price": 10}}
    }


def test_query_command_from_file(run, tmp_path):
    document = tmp_path / "all.graphql"
    document.write_text("{ getAllProducts { id } }", encoding="utf-8")
    result = run("query", f"@{document}")
    assert result.exit_code == 0
    assert json.loads(result.output) == {"data": {"getAllProducts": []}}


def test_query_command_errors_exit_nonzero(run):
    result = run("query", '{ getCart(cartId: "nope") { id } }')
    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_query_command_bad_variables(run):
    result = run("query", "{ getAllProducts { id } }", "--variables", "[1]")
    assert result.exit_code == 2
    assert "Variables must be a JSON object." in result.output


def test_schema_command(run):
    result = run("schema")
    assert result.exit_code == 0
    assert "type Mutation" in result.output


def test_data_dir_from_environment(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["product", "add", "--id", "p1", "--name", "Widget", "--price", "1"],
        env={"SHOPQL_DATA_DIR": str(tmp_path / "env-data")},
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "env-data" / "products" / "p1.json").is_file()


def test_schema_command_leaves_data_dir_alone(tmp_path):
    data_dir = tmp_path / "untouched"
    result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "schema"])
    assert result.exit_code == 0
    assert not data_dir.exists()
