"""Budget grid presentation logic for the Streamlit UI.

This module contains pure, testable transformations from a ``CategoryTree``
to the rows shown in the grid, the choices of the cell selectors and the
data of the monthly Income/Expenses chart.

The UI is responsible for:
    - keeping the ``BudgetEditingSession`` in ``st.session_state``,
    - sending cell edits and bulk operations to the session,
    - rendering the rows and the chart built here.
"""

import altair as alt

from src.domain.constants import (
    FIRST_MONTH,
    GRID_COLUMN_LABELS,
    LAST_MONTH,
    MONTH_LABELS,
    TOTAL_COLUMN,
)
from src.domain.models.budget import CategoryNode
from src.domain.models.transforms import TransformOperation
from src.domain.policies.transform_availability import available_transforms
from src.domain.services.amounts import format_amount
from src.domain.services.category_tree import ROOT_ROW, CategoryTree

INDENT = "\u00a0" * 3
CATEGORY_LABEL = GRID_COLUMN_LABELS[0]
TOTAL_LABEL = GRID_COLUMN_LABELS[-1]


def column_label(column: int) -> str:
    """Return the header of a month or totals column."""
    if column == TOTAL_COLUMN:
        return TOTAL_LABEL
    return MONTH_LABELS[column - FIRST_MONTH]


def indented_name(node: CategoryNode) -> str:
    """Return the display name indented by tree depth."""
    return f"{INDENT * node.depth}{node.display_name}"


def grid_rows(
    tree: CategoryTree,
    decimal_places: int,
) -> list[dict[str, str]]:
    """Build one display row per tree row.

    Args:
        tree: Category tree of the open budget year.
        decimal_places: Decimal places used to format amounts.

    Returns:
        list[dict[str, str]]: Rows keyed by column header, unsaved cells
        flagged with a trailing ``*``.
    """
    rows = []
    for row in tree.rows():
        node = tree.node(row)
        values = {CATEGORY_LABEL: indented_name(node)}
        for month in range(FIRST_MONTH, LAST_MONTH + 1):
            text = format_amount(node.month_value(month), decimal_places)
            if node.is_leaf and node.is_dirty(month):
                text = f"{text} *"
            values[column_label(month)] = text
        values[TOTAL_LABEL] = format_amount(node.year_total, decimal_places)
        rows.append(values)
    return rows


def editable_row_options(tree: CategoryTree) -> dict[int, str]:
    """Map leaf rows to selector labels, in tree order."""
    options = {}
    for row in tree.leaf_rows():
        node = tree.node(row)
        parent = tree.node(node.parent_index)
        if parent is not None and parent.depth > 0:
            options[row] = f"{parent.display_name} / {node.display_name}"
        else:
            options[row] = node.display_name
    return options


def transform_options(column: int) -> dict[TransformOperation, str]:
    """Map the operations offered for a column to their menu labels."""
    return {
        operation: operation.label
        for operation in available_transforms(column)
    }


def monthly_summary_data(
    tree: CategoryTree,
    decimal_places: int,
) -> list[dict[str, str | int | float]]:
    """Prepare chart data for the Income, Expenses and net rows.

    Args:
        tree: Category tree of the open budget year.
        decimal_places: Decimal places of the budget currency.

    Returns:
        list[dict[str, str | int | float]]: One record per month and series.
    """
    scale = 10 ** decimal_places
    series = [
        (tree.node(row).display_name, tree.node(row))
        for row in tree.children_of(ROOT_ROW)
    ]
    series.append((tree.root.display_name, tree.root))
    data: list[dict[str, str | int | float]] = []
    for month in range(FIRST_MONTH, LAST_MONTH + 1):
        for name, node in series:
            data.append(
                {
                    "month": column_label(month),
                    "month_index": month,
                    "series": name,
                    "amount": node.month_value(month) / scale,
                }
            )
    return data


def build_monthly_chart(
    data: list[dict[str, str | int | float]],
) -> alt.Chart:
    """Build a grouped bar chart of the monthly summary."""
    month_order = list(MONTH_LABELS)
    return (
        alt.Chart(alt.Data(values=data))
        .mark_bar(cornerRadiusTopLeft=3, cornerRadiusTopRight=3)
        .encode(
            x=alt.X("month:N", sort=month_order, title=None),
            xOffset=alt.XOffset("series:N"),
            y=alt.Y("amount:Q", title="Amount"),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(range=["#2e7d32", "#e76f51", "#457b9d"]),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=[
                alt.Tooltip("month:N"),
                alt.Tooltip("series:N"),
                alt.Tooltip("amount:Q", format=",.2f"),
            ],
        )
        .properties(height=320)
    )


__all__ = [
    "column_label",
    "indented_name",
    "grid_rows",
    "editable_row_options",
    "transform_options",
    "monthly_summary_data",
    "build_monthly_chart",
]
