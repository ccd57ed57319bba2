"""Historical price tools.

FMP returns these series newest-first. The provider order is kept and the
series is cut to a fixed length to bound the response size.
"""

from fmp_mcp.tools.base import Argument, Collection, ToolDefinition, fields, symbol_arg

EOD_MAX_ITEMS = 30
INTRADAY_MAX_ITEMS = 50

INTERVALS = ("1min", "5min", "15min", "30min", "1hour", "4hour")

DATE_RANGE_ARGUMENTS = (
    Argument("from", "string", "Start date in YYYY-MM-DD format"),
    Argument("to", "string", "End date in YYYY-MM-DD format"),
)

LIGHT_FIELDS = fields("date", "price", "volume")

FULL_FIELDS = fields(
    "date", "open", "high", "low", "close", "volume", "change", "changePercent", "vwap"
)

ADJUSTED_FIELDS = fields("date", "adjOpen", "adjHigh", "adjLow", "adjClose", "volume")

INTRADAY_FIELDS = fields("date", "open", "high", "low", "close", "volume")

TOOLS = (
    ToolDefinition(
        name="get_stock_chart_light",
        description="Get lightweight stock chart with closing price and volume only (End of Day)",
        endpoint="/historical-price-eod/light",
        arguments=(symbol_arg(), *DATE_RANGE_ARGUMENTS),
        shape=Collection(LIGHT_FIELDS, max_items=EOD_MAX_ITEMS),
        label="stock chart",
        empty_message="No chart data found for symbol: {symbol}",
    ),
    ToolDefinition(
        name="get_stock_price_volume",
        description="Get full stock price data with Open, High, Low, Close, Volume (OHLCV) - End of Day",
        endpoint="/historical-price-eod/full",
        arguments=(symbol_arg(), *DATE_RANGE_ARGUMENTS),
        shape=Collection(FULL_FIELDS, max_items=EOD_MAX_ITEMS),
        label="price data",
        empty_message="No price data found for symbol: {symbol}",
    ),
    ToolDefinition(
        name="get_dividend_adjusted_price",
        description="Get dividend-adjusted stock price data (adjusted for dividends and splits)",
        endpoint="/historical-price-eod/dividend-adjusted",
        arguments=(symbol_arg(), *DATE_RANGE_ARGUMENTS),
        shape=Collection(ADJUSTED_FIELDS, max_items=EOD_MAX_ITEMS),
        label="adjusted price",
        empty_message="No adjusted price data found for symbol: {symbol}",
    ),
    ToolDefinition(
        name="get_intraday_chart",
        description=(
            "Get intraday stock chart data (1min, 5min, 15min, 30min, 1hour, 4hour "
            "intervals) - Requires paid plan"
        ),
        endpoint="/historical-chart/{interval}",
        arguments=(
            symbol_arg(),
            Argument(
                "interval",
                "string",
                "Time interval for the chart",
                required=True,
                enum=INTERVALS,
                in_path=True,
            ),
            Argument("from", "string", "Start datetime in YYYY-MM-DD or YYYY-MM-DD HH:MM:SS format"),
            Argument("to", "string", "End datetime in YYYY-MM-DD or YYYY-MM-DD HH:MM:SS format"),
        ),
        shape=Collection(INTRADAY_FIELDS, max_items=INTRADAY_MAX_ITEMS),
        label="intraday chart",
        empty_message="No intraday data found for symbol: {symbol}",
        restricted_message="Intraday data requires a paid FMP subscription.",
    ),
)
