"""Company reference tools: profile, executives, peers, rating, notes, search."""

from fmp_mcp.tools.base import (
    Argument,
    Collection,
    FirstRecord,
    Single,
    ToolDefinition,
    fields,
    symbol_arg,
)

PROFILE_FIELDS = fields(
    "symbol",
    "companyName",
    "price",
    "marketCap",
    "sector",
    "industry",
    "ceo",
    "website",
    "description",
    "country",
    "city",
    "state",
    "address",
    "fullTimeEmployees",
    "ipoDate",
    "exchange",
    "currency",
    "beta",
    "volAvg",
    "lastDiv",
    "range",
    "changes",
    "dcfDiff",
    "dcf",
    "image",
)

EXECUTIVE_FIELDS = fields(
    "name", "title", "pay", "currencyPay", "gender", "yearBorn", "titleSince"
)

RATING_FIELDS = fields(
    "symbol",
    "date",
    "rating",
    "ratingScore",
    "ratingRecommendation",
    "ratingDetailsDCFScore",
    "ratingDetailsDCFRecommendation",
    "ratingDetailsROEScore",
    "ratingDetailsROERecommendation",
    "ratingDetailsROAScore",
    "ratingDetailsROARecommendation",
    "ratingDetailsDEScore",
    "ratingDetailsDERecommendation",
    "ratingDetailsPEScore",
    "ratingDetailsPERecommendation",
    "ratingDetailsPBScore",
    "ratingDetailsPBRecommendation",
)

SEARCH_FIELDS = fields("symbol", "name", "currency", "stockExchange", "exchangeShortName")

TOOLS = (
    ToolDefinition(
        name="get_company_profile",
        description=(
            "Get detailed company profile information including description, CEO, "
            "sector, industry, market cap, and more"
        ),
        endpoint="/profile",
        arguments=(symbol_arg(),),
        shape=Single(PROFILE_FIELDS),
        label="company profile",
        empty_message="No company profile found for symbol: {symbol}",
    ),
    ToolDefinition(
        name="get_key_executives",
        description=(
            "Get information about key executives of a company including their "
            "names, titles, and compensation"
        ),
        endpoint="/key-executives",
        arguments=(symbol_arg(),),
        shape=Collection(EXECUTIVE_FIELDS),
        label="key executives",
        empty_message="No executive information found for symbol: {symbol}",
    ),
    ToolDefinition(
        name="get_stock_peers",
        description="Get a list of stock peers (similar companies in the same sector/industry)",
        endpoint="/stock_peers",
        arguments=(symbol_arg(),),
        shape=FirstRecord(),
        label="stock peers",
        empty_message="No peers found for symbol: {symbol}",
    ),
    ToolDefinition(
        name="get_company_rating",
        description=(
            "Get company rating including overall rating, DCF recommendation, ROE, "
            "ROA, and other financial metrics ratings"
        ),
        endpoint="/rating",
        arguments=(symbol_arg(),),
        shape=Single(RATING_FIELDS),
        label="company rating",
        empty_message="No rating found for symbol: {symbol}",
    ),
    ToolDefinition(
        name="get_company_notes",
        description="Get company notes and core business description",
        endpoint="/company-core-information",
        arguments=(symbol_arg(),),
        shape=FirstRecord(),
        label="company notes",
        empty_message="No company notes found for symbol: {symbol}",
    ),
    ToolDefinition(
        name="search_company",
        description="Search for companies by name or ticker symbol",
        endpoint="/search-name",
        arguments=(
            Argument(
                "query",
                "string",
                "Search query (company name or ticker symbol)",
                required=True,
            ),
            Argument(
                "limit",
                "integer",
                "Maximum number of results to return (default: 10)",
                default=10,
            ),
        ),
        shape=Collection(SEARCH_FIELDS),
        label="company search",
        operation="Error searching companies",
        empty_message="No companies found for query: {query}",
    ),
)
