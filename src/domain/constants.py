"""Domain constants for the monthly budget grid."""

MONTHS_IN_YEAR = 12
FIRST_MONTH = 1
LAST_MONTH = 12

# Grid column holding the year total of a row. Columns 1..12 are months.
TOTAL_COLUMN = 13

MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "June",
    "July",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

GRID_COLUMN_LABELS = ("Category", *MONTH_LABELS, "Totals")

OVERALL_TOTAL_KEY = "__overall__"
INCOME_TOTAL_KEY = "__income__"
EXPENSE_TOTAL_KEY = "__expense__"

OVERALL_TOTAL_NAME = "Income-Expenses"
INCOME_TOTAL_NAME = "Income"
EXPENSE_TOTAL_NAME = "Expenses"

DEFAULT_BUDGET_NAME = "Budget"
DEFAULT_DECIMAL_PLACES = 2


__all__ = [
    "MONTHS_IN_YEAR",
    "FIRST_MONTH",
    "LAST_MONTH",
    "TOTAL_COLUMN",
    "MONTH_LABELS",
    "GRID_COLUMN_LABELS",
    "OVERALL_TOTAL_KEY",
    "INCOME_TOTAL_KEY",
    "EXPENSE_TOTAL_KEY",
    "OVERALL_TOTAL_NAME",
    "INCOME_TOTAL_NAME",
    "EXPENSE_TOTAL_NAME",
    "DEFAULT_BUDGET_NAME",
    "DEFAULT_DECIMAL_PLACES",
]
