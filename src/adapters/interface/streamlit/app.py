"""Streamlit budget editor entry point."""

from datetime import date

import streamlit as st

from src.adapters.interface.streamlit.budget_grid import (
    build_monthly_chart,
    column_label,
    editable_row_options,
    grid_rows,
    monthly_summary_data,
    transform_options,
)
from src.application.use_cases.budget_session import BudgetEditingSession
from src.domain.constants import FIRST_MONTH, LAST_MONTH, TOTAL_COLUMN
from src.domain.policies.transform_availability import budget_year_choices
from src.domain.services.amounts import format_amount
from src.infrastructure.container import (
    build_budget_catalog,
    build_budget_session,
    build_budget_store,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings

SESSION_KEY = "budget_session"
BUDGET_NAME_KEY = "budget_name"
MONTH_COLUMNS = list(range(FIRST_MONTH, LAST_MONTH + 1))


def _budget_names(default_name: str) -> list[str]:
    """Return stored budget names, always including the default budget."""
    names = set(build_budget_catalog().fetch_budget_names())
    names.add(default_name)
    return sorted(names)


def _build_session(
    budget_name: str,
    year: int,
    settings: BudgetSettings,
) -> BudgetEditingSession:
    """Open a new editing session."""
    return build_budget_session(year, budget_name=budget_name, settings=settings)


def _get_session(
    budget_name: str,
    year: int,
    settings: BudgetSettings,
    save_on_switch: bool,
) -> BudgetEditingSession:
    """Return the session of the selected budget and year.

    A session kept from a previous rerun is switched when the selection
    changed; pending changes are saved or dropped as requested.
    """
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        session = _build_session(budget_name, year, settings)
        st.session_state[SESSION_KEY] = session
        st.session_state[BUDGET_NAME_KEY] = budget_name
        return session

    current_name = st.session_state.get(BUDGET_NAME_KEY)
    if current_name == budget_name and session.year == year:
        return session
    store = None
    if current_name != budget_name:
        store = build_budget_store(budget_name)
    result = session.switch(
        budget_store=store,
        year=year,
        save_changes=save_on_switch,
    )
    st.session_state[BUDGET_NAME_KEY] = budget_name
    if result is not None:
        st.toast(f"Saved {result.written_count} budget lines")
    return session


def _render_cell_editor(
    session: BudgetEditingSession,
    decimal_places: int,
) -> None:
    """Render the single cell editor."""
    st.subheader("Edit cell")
    options = editable_row_options(session.tree)
    if not options:
        st.info("No editable categories.")
        return
    row = st.selectbox(
        "Category",
        list(options),
        format_func=options.get,
        key="edit_row",
    )
    month = st.selectbox(
        "Month",
        MONTH_COLUMNS,
        format_func=column_label,
        key="edit_month",
    )
    current = format_amount(session.tree.value_at(row, month), decimal_places)
    text = st.text_input(
        "Amount",
        value=current,
        key=f"edit_amount_{row}_{month}",
    )
    if st.button("Apply amount"):
        if session.edit_cell_text(row, month, text):
            st.success(f"{options[row]}: {column_label(month)} updated")
        else:
            st.warning("Amount unchanged or not a valid number.")


def _render_transform_menu(session: BudgetEditingSession) -> None:
    """Render the bulk operations offered for a row and column."""
    st.subheader("Bulk edit")
    options = editable_row_options(session.tree)
    if not options:
        return
    row = st.selectbox(
        "Category",
        list(options),
        format_func=options.get,
        key="transform_row",
    )
    column = st.selectbox(
        "Column",
        [*MONTH_COLUMNS, TOTAL_COLUMN],
        format_func=column_label,
        key="transform_column",
    )
    operations = transform_options(column)
    operation = st.selectbox(
        "Operation",
        list(operations),
        format_func=operations.get,
        key="transform_operation",
    )
    if st.button("Apply operation"):
        if session.apply_transform(operation, row, column):
            st.success(operations[operation])
        else:
            st.warning("Operation not applied.")


def _render_initialize(
    session: BudgetEditingSession,
    budget_names: list[str],
) -> None:
    """Render the controls seeding the year from last year."""
    with st.expander(f"Initialize {session.year} from {session.year - 1}"):
        source = st.radio(
            "Source",
            ["Actual spending", "Another budget"],
            horizontal=True,
        )
        source_name = None
        if source == "Another budget":
            source_name = st.selectbox("Budget to copy", budget_names)
        if st.button("Initialize"):
            if source_name is None:
                changed = session.initialize_from_prior_actuals()
            else:
                changed = session.initialize_from_prior_budget(
                    build_budget_store(source_name)
                )
            st.success(f"{changed} cells changed")


def _render_save_controls(session: BudgetEditingSession) -> None:
    """Render save and discard buttons."""
    save_col, discard_col = st.columns(2)
    if save_col.button("Save", type="primary"):
        result = session.save()
        st.success(
            f"Saved {result.written_count} lines "
            f"({result.skipped_count} empty cells skipped)"
        )
    if discard_col.button("Discard changes"):
        session.discard()
        st.info("Unsaved changes discarded")
    if session.has_unsaved_changes:
        st.warning("The budget has unsaved changes (marked with *).")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Budget Editor", layout="wide")
    st.title("Budget Editor")
    logger = get_app_logger()

    try:
        settings = BudgetSettings.from_env()
        budget_names = _budget_names(settings.budget_name)
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        st.error(str(exc))
        return

    budget_name = st.sidebar.selectbox(
        "Budget",
        budget_names,
        index=budget_names.index(settings.budget_name),
    )
    years = budget_year_choices(date.today())
    year = st.sidebar.selectbox("Year", years, index=1)
    save_on_switch = st.sidebar.checkbox(
        "Save changes when switching",
        value=True,
    )
    session = _get_session(budget_name, year, settings, save_on_switch)

    edit_col, transform_col = st.columns(2)
    with edit_col:
        _render_cell_editor(session, settings.decimal_places)
    with transform_col:
        _render_transform_menu(session)
    _render_initialize(session, budget_names)
    _render_save_controls(session)

    st.subheader(f"{budget_name} {session.year}")
    st.dataframe(
        grid_rows(session.tree, settings.decimal_places),
        width="stretch",
        hide_index=True,
        height=520,
    )
    st.altair_chart(
        build_monthly_chart(
            monthly_summary_data(session.tree, settings.decimal_places)
        ),
        width="stretch",
    )


if __name__ == "__main__":  # pragma: no cover
    main()
