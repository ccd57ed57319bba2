"""Unit tests for argument validation."""

import pytest

from fmp_mcp.errors import ValidationError
from fmp_mcp.tools import TOOL_REGISTRY
from fmp_mcp.validation import validate_tool_arguments


def test_valid_arguments_fill_defaults():
    """Omitted optional arguments take their declared defaults."""
    args = validate_tool_arguments(TOOL_REGISTRY["get_income_statement"], {"symbol": "aapl"})

    assert args == {"symbol": "AAPL", "period": "annual", "limit": 5}


def test_missing_required_field():
    """Missing required argument is rejected."""
    with pytest.raises(ValidationError, match="'symbol' is a required property"):
        validate_tool_arguments(TOOL_REGISTRY["get_company_profile"], {})


def test_none_arguments_treated_as_empty():
    """No arguments at all behaves like an empty object."""
    with pytest.raises(ValidationError, match="required"):
        validate_tool_arguments(TOOL_REGISTRY["get_company_profile"], None)


def test_wrong_type():
    """Wrong primitive type is rejected."""
    with pytest.raises(ValidationError):
        validate_tool_arguments(
            TOOL_REGISTRY["get_income_statement"], {"symbol": "AAPL", "limit": "five"}
        )


def test_symbol_must_be_string():
    with pytest.raises(ValidationError):
        validate_tool_arguments(TOOL_REGISTRY["get_stock_quote"], {"symbol": 42})


def test_enum_violation():
    """Values outside an enum are rejected."""
    with pytest.raises(ValidationError, match="is not one of"):
        validate_tool_arguments(
            TOOL_REGISTRY["get_income_statement"], {"symbol": "AAPL", "period": "monthly"}
        )


def test_interval_is_required_for_intraday():
    with pytest.raises(ValidationError, match="'interval' is a required property"):
        validate_tool_arguments(TOOL_REGISTRY["get_intraday_chart"], {"symbol": "AAPL"})


def test_extra_arguments_are_ignored():
    """Undeclared keys neither fail validation nor leak into the result."""
    args = validate_tool_arguments(
        TOOL_REGISTRY["get_stock_quote"], {"symbol": "msft", "verbose": True}
    )

    assert args == {"symbol": "MSFT"}


def test_integral_float_limit_becomes_int():
    args = validate_tool_arguments(
        TOOL_REGISTRY["search_company"], {"query": "apple", "limit": 3.0}
    )

    assert args["limit"] == 3
    assert isinstance(args["limit"], int)


def test_query_and_index_symbol_keep_their_case():
    """Free-text queries and index symbols are not upper-cased."""
    search = validate_tool_arguments(TOOL_REGISTRY["search_company"], {"query": "Apple Inc"})
    index = validate_tool_arguments(TOOL_REGISTRY["get_index_quote"], {"symbol": "^gspc"})

    assert search["query"] == "Apple Inc"
    assert index["symbol"] == "^gspc"


def test_batch_symbols_are_upper_cased():
    args = validate_tool_arguments(
        TOOL_REGISTRY["get_batch_stock_quotes"], {"symbols": "aapl,msft"}
    )

    assert args["symbols"] == "AAPL,MSFT"
