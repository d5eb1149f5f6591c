"""
market_discounts.runner: host invocation shim.

Reads one run input document (JSON) from stdin or --input, runs a resolver
and writes the result document to stdout:

    market-discounts cart-lines < input.json
    market-discounts delivery-options --input input.json
"""

import json
import sys
from typing import Dict, NoReturn

import click

from market_discounts import __version__
from market_discounts.core.constants import DiscountErrorCode
from market_discounts.core.exceptions import DiscountEngineError
from market_discounts.discounts.engine import DiscountEngine
from market_discounts.dto.operations import RunResult
from market_discounts.logging.utils import get_app_logger, initialize_logging

logger = get_app_logger("market_discounts.runner")


def _fail(detail: Dict) -> NoReturn:
    click.echo(json.dumps(detail, ensure_ascii=False), err=True)
    sys.exit(1)


def _execute(resolver_method: str, input_file, pretty: bool) -> None:
    try:
        payload = json.load(input_file)
    except ValueError as e:
        logger.error(f"runner_input_unreadable | error={e}")
        _fail({"error_code": DiscountErrorCode.INVALID_INPUT, "message": f"Input is not valid JSON: {e}"})

    if not isinstance(payload, dict):
        _fail({"error_code": DiscountErrorCode.INVALID_INPUT, "message": "Input must be a JSON object"})

    try:
        engine = DiscountEngine()
        result: RunResult = getattr(engine, resolver_method)(payload)
    except DiscountEngineError as e:
        _fail(e.detail)

    if pretty:
        click.echo(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    else:
        click.echo(json.dumps(result.to_payload(), separators=(",", ":"), ensure_ascii=False))


@click.group()
@click.version_option(__version__, prog_name="market-discounts")
def cli():
    """Market-aware discount resolution for checkout carts."""
    initialize_logging()


@cli.command("cart-lines")
@click.option("--input", "input_file", type=click.File("r"), default="-", help="Run input JSON (default: stdin).")
@click.option("--pretty", is_flag=True, help="Indent the result document.")
def cart_lines(input_file, pretty):
    """Product and order discount operations for the cart lines."""
    _execute("run_cart_lines", input_file, pretty)


@cli.command("delivery-options")
@click.option("--input", "input_file", type=click.File("r"), default="-", help="Run input JSON (default: stdin).")
@click.option("--pretty", is_flag=True, help="Indent the result document.")
def delivery_options(input_file, pretty):
    """Delivery discount operations for the first delivery group."""
    _execute("run_delivery_options", input_file, pretty)


def main():
    cli()


if __name__ == "__main__":
    main()
