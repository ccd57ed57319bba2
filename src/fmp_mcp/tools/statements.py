"""Financial statement tools: income, balance sheet, cash flow, ratios, key metrics.

All five share the same arguments. ``period`` and ``limit`` always travel
upstream, falling back to their declared defaults.
"""

from fmp_mcp.tools.base import Argument, Collection, ToolDefinition, fields, symbol_arg

PERIODS = ("annual", "quarter")

STATEMENT_ARGUMENTS = (
    symbol_arg(),
    Argument(
        "period",
        "string",
        "Reporting period: 'annual' or 'quarter' (default: annual)",
        default="annual",
        enum=PERIODS,
    ),
    Argument("limit", "integer", "Number of periods to return (default: 5)", default=5),
)

INCOME_FIELDS = fields(
    "date",
    "symbol",
    "fiscalYear",
    "period",
    "revenue",
    "costOfRevenue",
    "grossProfit",
    "researchAndDevelopmentExpenses",
    "sellingGeneralAndAdministrativeExpenses",
    "operatingExpenses",
    "operatingIncome",
    "ebitda",
    "ebit",
    "incomeBeforeTax",
    "incomeTaxExpense",
    "netIncome",
    "eps",
    "epsDiluted",
    "weightedAverageShsOut",
    "weightedAverageShsOutDil",
)

BALANCE_SHEET_FIELDS = fields(
    "date",
    "symbol",
    "fiscalYear",
    "period",
    "cashAndCashEquivalents",
    "shortTermInvestments",
    "cashAndShortTermInvestments",
    "netReceivables",
    "inventory",
    "totalCurrentAssets",
    "propertyPlantEquipmentNet",
    "goodwill",
    "intangibleAssets",
    "longTermInvestments",
    "totalNonCurrentAssets",
    "totalAssets",
    "accountPayables",
    "shortTermDebt",
    "totalCurrentLiabilities",
    "longTermDebt",
    "totalNonCurrentLiabilities",
    "totalLiabilities",
    "commonStock",
    "retainedEarnings",
    "totalStockholdersEquity",
    "totalEquity",
    "totalLiabilitiesAndStockholdersEquity",
)

CASH_FLOW_FIELDS = fields(
    "date",
    "symbol",
    "fiscalYear",
    "period",
    "netIncome",
    "depreciationAndAmortization",
    "stockBasedCompensation",
    "changeInWorkingCapital",
    "netCashProvidedByOperatingActivities",
    "investmentsInPropertyPlantAndEquipment",
    "acquisitionsNet",
    "purchasesOfInvestments",
    "salesMaturitiesOfInvestments",
    "netCashProvidedByInvestingActivities",
    "netDebtIssuance",
    "netStockIssuance",
    "commonStockRepurchased",
    "commonDividendsPaid",
    "netCashProvidedByFinancingActivities",
    "netChangeInCash",
    "cashAtEndOfPeriod",
    "cashAtBeginningOfPeriod",
    "operatingCashFlow",
    "capitalExpenditure",
    "freeCashFlow",
)

RATIO_FIELDS = fields(
    "date",
    "symbol",
    "period",
    "currentRatio",
    "quickRatio",
    "cashRatio",
    "grossProfitMargin",
    "operatingProfitMargin",
    "netProfitMargin",
    "returnOnAssets",
    "returnOnEquity",
    "returnOnCapitalEmployed",
    "debtRatio",
    "debtEquityRatio",
    "priceEarningsRatio",
    "priceToBookRatio",
    "priceToSalesRatio",
    "enterpriseValueMultiple",
    "priceFairValue",
    "dividendYield",
    "payoutRatio",
)

KEY_METRIC_FIELDS = fields(
    "date",
    "symbol",
    "period",
    "revenuePerShare",
    "netIncomePerShare",
    "operatingCashFlowPerShare",
    "freeCashFlowPerShare",
    "cashPerShare",
    "bookValuePerShare",
    "tangibleBookValuePerShare",
    "shareholdersEquityPerShare",
    "interestDebtPerShare",
    "marketCap",
    "enterpriseValue",
    "peRatio",
    "priceToSalesRatio",
    "pbRatio",
    "evToSales",
    "evToOperatingCashFlow",
    "evToFreeCashFlow",
    "earningsYield",
    "freeCashFlowYield",
    "debtToEquity",
    "debtToAssets",
    "netDebtToEBITDA",
    "currentRatio",
    "roe",
    "roic",
)


def _statement_tool(name, description, endpoint, field_map, label):
    return ToolDefinition(
        name=name,
        description=description,
        endpoint=endpoint,
        arguments=STATEMENT_ARGUMENTS,
        shape=Collection(field_map),
        label=label,
        empty_message=f"No {label} found for symbol: {{symbol}}",
    )


TOOLS = (
    _statement_tool(
        "get_income_statement",
        "Get income statement (profit and loss statement) including revenue, expenses, and net income",
        "/income-statement",
        INCOME_FIELDS,
        "income statement",
    ),
    _statement_tool(
        "get_balance_sheet",
        "Get balance sheet statement including assets, liabilities, and shareholders equity",
        "/balance-sheet-statement",
        BALANCE_SHEET_FIELDS,
        "balance sheet",
    ),
    _statement_tool(
        "get_cash_flow_statement",
        "Get cash flow statement including operating, investing, and financing activities",
        "/cash-flow-statement",
        CASH_FLOW_FIELDS,
        "cash flow statement",
    ),
    _statement_tool(
        "get_financial_ratios",
        "Get key financial ratios including profitability, liquidity, debt, and valuation ratios",
        "/ratios",
        RATIO_FIELDS,
        "financial ratios",
    ),
    _statement_tool(
        "get_key_metrics",
        "Get key financial metrics including market cap, enterprise value, PE ratio, and per share values",
        "/key-metrics",
        KEY_METRIC_FIELDS,
        "key metrics",
    ),
)
