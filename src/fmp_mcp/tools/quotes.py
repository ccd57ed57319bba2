"""Quote tools for stocks, ETFs, forex, crypto, commodities and indices."""

from fmp_mcp.tools.base import (
    AllRecords,
    Argument,
    FirstRecord,
    Single,
    ToolDefinition,
    fields,
    symbol_arg,
)

QUOTE_FIELDS = fields(
    "symbol",
    "name",
    "price",
    "change",
    "changePercentage",
    "volume",
    "dayLow",
    "dayHigh",
    "yearLow",
    "yearHigh",
    "marketCap",
    "priceAvg50",
    "priceAvg200",
    "open",
    "previousClose",
    "exchange",
    "timestamp",
)

# FMP spells year-to-date "ytd"; the other horizons are already upper case.
PRICE_CHANGE_FIELDS = (
    ("symbol", "symbol"),
    ("1D", "1D"),
    ("5D", "5D"),
    ("1M", "1M"),
    ("3M", "3M"),
    ("6M", "6M"),
    ("YTD", "ytd"),
    ("1Y", "1Y"),
    ("3Y", "3Y"),
    ("5Y", "5Y"),
    ("10Y", "10Y"),
)


def _passthrough_quote(
    name, description, endpoint, label, symbol_help, empty_noun, hint="", uppercase=True
):
    """A quote tool that returns FMP's first record untouched."""
    return ToolDefinition(
        name=name,
        description=description,
        endpoint=endpoint,
        arguments=(symbol_arg(symbol_help, uppercase=uppercase),),
        shape=FirstRecord(),
        label=label,
        empty_message=f"No {empty_noun} found for symbol: {{symbol}}{hint}",
    )


TOOLS = (
    ToolDefinition(
        name="get_stock_quote",
        description=(
            "Get real-time stock quote including price, change, volume, market cap, "
            "and 52-week range"
        ),
        endpoint="/quote",
        arguments=(symbol_arg(),),
        shape=Single(QUOTE_FIELDS),
        label="stock quote",
        empty_message="No quote found for symbol: {symbol}",
    ),
    _passthrough_quote(
        "get_stock_quote_short",
        "Get simplified stock quote with price, change, and volume only",
        "/quote-short",
        "stock quote",
        "Stock ticker symbol (e.g., AAPL, MSFT, GOOGL)",
        "quote",
    ),
    ToolDefinition(
        name="get_stock_price_change",
        description=(
            "Get stock price change percentages over multiple time periods "
            "(1D, 5D, 1M, 3M, 6M, YTD, 1Y, 3Y, 5Y, 10Y)"
        ),
        endpoint="/stock-price-change",
        arguments=(symbol_arg(),),
        shape=Single(PRICE_CHANGE_FIELDS),
        label="price change",
        empty_message="No price change data found for symbol: {symbol}",
    ),
    _passthrough_quote(
        "get_aftermarket_trade",
        "Get aftermarket (pre-market and post-market) trade data",
        "/aftermarket-trade",
        "aftermarket trade",
        "Stock ticker symbol (e.g., AAPL, MSFT, GOOGL)",
        "aftermarket trade data",
    ),
    _passthrough_quote(
        "get_aftermarket_quote",
        "Get aftermarket quote with bid/ask prices and sizes",
        "/aftermarket-quote",
        "aftermarket quote",
        "Stock ticker symbol (e.g., AAPL, MSFT, GOOGL)",
        "aftermarket quote",
    ),
    ToolDefinition(
        name="get_batch_stock_quotes",
        description=(
            "Get quotes for multiple stocks at once (comma-separated symbols) - "
            "Requires paid plan"
        ),
        endpoint="/batch-quote",
        arguments=(
            Argument(
                "symbols",
                "string",
                "Comma-separated stock symbols (e.g., AAPL,MSFT,GOOGL)",
                required=True,
                uppercase=True,
            ),
        ),
        shape=AllRecords(),
        label="batch quotes",
        empty_message="No quotes found for symbols: {symbols}",
        restricted_message="Batch quotes require a paid FMP subscription.",
    ),
    _passthrough_quote(
        "get_etf_quote",
        "Get ETF quote data",
        "/etf-quote",
        "ETF quote",
        "ETF symbol (e.g., SPY, QQQ, VTI)",
        "ETF quote",
        hint=". Try using get_stock_quote instead.",
    ),
    _passthrough_quote(
        "get_forex_quote",
        "Get forex currency pair quote",
        "/forex-quote",
        "forex quote",
        "Forex pair symbol (e.g., EURUSD, GBPUSD, USDJPY)",
        "forex quote",
    ),
    _passthrough_quote(
        "get_crypto_quote",
        "Get cryptocurrency quote",
        "/crypto-quote",
        "crypto quote",
        "Crypto symbol (e.g., BTCUSD, ETHUSD)",
        "crypto quote",
    ),
    _passthrough_quote(
        "get_commodity_quote",
        "Get commodity quote (gold, oil, etc.)",
        "/commodity-quote",
        "commodity quote",
        "Commodity symbol (e.g., GCUSD for gold, CLUSD for oil)",
        "commodity quote",
    ),
    # Index symbols keep their casing and the leading "^"
    _passthrough_quote(
        "get_index_quote",
        "Get market index quote (S&P 500, NASDAQ, etc.)",
        "/index-quote",
        "index quote",
        "Index symbol (e.g., ^GSPC for S&P 500, ^IXIC for NASDAQ)",
        "index quote",
        uppercase=False,
    ),
)
