import json

from click.testing import CliRunner

from market_discounts import __version__
from market_discounts.runner import cli


def _result_document(result):
    # log records may share the captured stream on older click versions; the result is the last line
    return json.loads(result.stdout.strip().splitlines()[-1])


def test_cart_lines_command_reads_stdin(make_market, make_cart_lines_input):
    payload = make_cart_lines_input([make_market()])

    result = CliRunner().invoke(cli, ["cart-lines"], input=json.dumps(payload))

    assert result.exit_code == 0, result.output
    document = _result_document(result)
    assert document["operations"][0]["productDiscountsAdd"]["candidates"][0]["value"] == {
        "fixedAmount": {"amount": "10.0"}
    }


def test_delivery_options_command_reads_input_file(tmp_path, make_market, make_delivery_input):
    input_path = tmp_path / "input.json"
    input_path.write_text(json.dumps(make_delivery_input([make_market(deliveryPercentage="100")])), encoding="utf-8")

    result = CliRunner().invoke(cli, ["delivery-options", "--input", str(input_path)])

    assert result.exit_code == 0, result.output
    assert len(_result_document(result)["operations"][0]["deliveryDiscountsAdd"]["candidates"]) == 2


def test_missing_delivery_groups_exits_with_error_document(make_market, make_delivery_input):
    payload = make_delivery_input([make_market(deliveryPercentage="100")], groups=[])

    result = CliRunner().invoke(cli, ["delivery-options"], input=json.dumps(payload))

    assert result.exit_code == 1
    assert "MISSING_DELIVERY_GROUPS" in result.output


def test_unreadable_input_exits_with_error_document():
    result = CliRunner().invoke(cli, ["cart-lines"], input="{broken")

    assert result.exit_code == 1
    assert "INVALID_INPUT" in result.output


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_invalid_settings_exit_with_error_document(monkeypatch, make_market, make_cart_lines_input):
    monkeypatch.setenv("MARKET_MATCHERS", "market_id,planet")
    payload = make_cart_lines_input([make_market()])

    result = CliRunner().invoke(cli, ["cart-lines"], input=json.dumps(payload))

    assert result.exit_code == 1
    assert "INVALID_SETTINGS" in result.output
