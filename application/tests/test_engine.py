import logging

import pytest

from market_discounts.context.evaluation_context import evaluation_context, evaluation_scope
from market_discounts.core.constants import DiscountErrorCode
from market_discounts.core.exceptions import InvalidRunInputError
from market_discounts.dto.run_input import RunInput
from market_discounts.logging.filters import EvaluationContextFilter


def test_engine_accepts_parsed_run_input(engine, make_market, make_cart_lines_input):
    run_input = RunInput.model_validate(make_cart_lines_input([make_market()]))

    result = engine.run_cart_lines(run_input)

    assert result.operations[0].kind == "productDiscountsAdd"
    assert result.operations[0].body.selection_strategy == "ALL"


def test_invalid_run_input_is_reported_with_error_code(engine):
    with pytest.raises(InvalidRunInputError) as exc_info:
        engine.run_cart_lines({"cart": {"lines": [{"quantity": 1}]}})

    detail = exc_info.value.detail
    assert detail["error_code"] == DiscountErrorCode.INVALID_INPUT
    fields = {error["field"] for error in detail["errors"]}
    assert "discount" in fields
    assert "cart.lines.0.id" in fields


def test_discount_classes_are_case_insensitive(engine, make_market, make_cart_lines_input):
    payload = make_cart_lines_input([make_market()], classes=["product"])

    assert len(engine.run_cart_lines(payload).operations) == 1


def test_cart_level_presentment_currency_is_a_fallback(engine, make_market, make_cart_lines_input):
    payload = make_cart_lines_input([make_market()], market_id=None, country=None)
    del payload["cart"]["buyerIdentity"]
    payload["cart"]["presentmentCurrencyCode"] = "CAD"

    assert len(engine.run_cart_lines(payload).operations) == 1


def test_input_documents_are_not_mutated(engine, make_market, make_cart_lines_input):
    payload = make_cart_lines_input([make_market(excludeOnSale=True)])
    snapshot = repr(payload)

    engine.run_cart_lines(payload)

    assert repr(payload) == snapshot


def test_evaluation_scope_feeds_log_records():
    record = logging.LogRecord("market_discounts.test", logging.INFO, __file__, 1, "msg", None, None)

    with evaluation_scope("cart_lines", discount_code="WELCOME10") as ctx:
        evaluation_context.market_id = "gid://shopify/Market/1"
        EvaluationContextFilter().filter(record)

    assert record.resolver == "cart_lines"
    assert record.discount_code == "WELCOME10"
    assert record.market_id == "gid://shopify/Market/1"
    assert record.evaluation_id == ctx.evaluation_id
    assert evaluation_context.resolver is None


@pytest.mark.parametrize("classes", [5, "PRODUCT", {"kind": "PRODUCT"}])
def test_discount_classes_must_be_a_list(engine, make_market, make_cart_lines_input, classes):
    payload = make_cart_lines_input([make_market()])
    payload["discount"]["discountClasses"] = classes

    with pytest.raises(InvalidRunInputError) as exc_info:
        engine.run_cart_lines(payload)

    fields = {error["field"] for error in exc_info.value.detail["errors"]}
    assert "discount.discountClasses" in fields
