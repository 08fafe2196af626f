"""Category tree model backing the monthly budget grid.

The tree is an ordered arena of ``CategoryNode`` rows laid out in pre-order:

* row 0 is the overall Income-Expenses total;
* the Income subtotal follows with every income category below it;
* the Expenses subtotal follows with every expense category below it.

Parent links are row indices into the same list. Aggregate rows are never
edited directly: every change to a leaf month is propagated upward so each
aggregate month always equals the sum of its children, and every row keeps
its year total equal to the sum of its twelve months. The overall total row
holds Income minus Expenses, so deltas coming from expense categories are
negated when they reach it.
"""

from collections.abc import Iterable, Iterator
import logging
from logging import Logger

from src.domain.constants import (
    EXPENSE_TOTAL_KEY,
    EXPENSE_TOTAL_NAME,
    FIRST_MONTH,
    INCOME_TOTAL_KEY,
    INCOME_TOTAL_NAME,
    LAST_MONTH,
    OVERALL_TOTAL_KEY,
    OVERALL_TOTAL_NAME,
    TOTAL_COLUMN,
)
from src.domain.models.budget import (
    CategoryKind,
    CategoryNode,
    CategoryRecord,
    CellChangeListener,
    DirtyCell,
)

ROOT_ROW = 0

_SECTIONS = (
    (CategoryKind.INCOME, INCOME_TOTAL_KEY, INCOME_TOTAL_NAME),
    (CategoryKind.EXPENSE, EXPENSE_TOTAL_KEY, EXPENSE_TOTAL_NAME),
)


def is_month(column: int) -> bool:
    """Return True when the column addresses a calendar month."""
    return FIRST_MONTH <= column <= LAST_MONTH


class CategoryTree:
    """Ordered category rows with upward month aggregation."""

    def __init__(
        self,
        nodes: list[CategoryNode],
        logger: Logger | None = None,
        listener: CellChangeListener | None = None,
    ) -> None:
        """Initialize the tree.

        Args:
            nodes: Rows in pre-order, row 0 being the overall total.
            logger: Logger used for integrity faults and rejected edits.
            listener: Optional sink told which (row, column) cells changed.
        """
        self._nodes = nodes
        self._logger = logger or logging.getLogger(__name__)
        self._listener = listener
        self._rows_by_identity = {
            node.identity: row for row, node in enumerate(nodes)
        }

    @classmethod
    def build(
        cls,
        records: Iterable[CategoryRecord],
        logger: Logger | None = None,
        listener: CellChangeListener | None = None,
    ) -> "CategoryTree":
        """Build a tree from category source records.

        Records keep their source order within each kind. The parent of a
        record is the closest preceding record one level shallower; records
        whose parent cannot be resolved are skipped. A row becomes a roll-up
        only when it received children, whatever the record claims.

        Args:
            records: Categories in pre-order, as produced by a source.
            logger: Logger used for skipped records.
            listener: Optional sink told which cells changed.

        Returns:
            CategoryTree: Tree with all month values at zero.
        """
        resolved_logger = logger or logging.getLogger(__name__)
        records = list(records)
        nodes = [
            CategoryNode(
                identity=OVERALL_TOTAL_KEY,
                display_name=OVERALL_TOTAL_NAME,
                depth=0,
                parent_index=None,
                kind=CategoryKind.ROOT,
                is_aggregate=True,
            )
        ]
        seen: set[str] = set()
        flagged: list[tuple[int, CategoryRecord]] = []
        for kind, section_key, section_name in _SECTIONS:
            section_row = len(nodes)
            nodes.append(
                CategoryNode(
                    identity=section_key,
                    display_name=section_name,
                    depth=1,
                    parent_index=ROOT_ROW,
                    kind=kind,
                    is_aggregate=True,
                )
            )
            # stack[d] is the row of the latest node at record depth d - 1.
            stack = [section_row]
            for record in records:
                if record.kind is not kind:
                    continue
                if record.guid in seen:
                    resolved_logger.warning(
                        f"Skipping duplicate category {record.name} "
                        f"({record.guid})"
                    )
                    continue
                if record.depth < 0 or record.depth >= len(stack):
                    resolved_logger.warning(
                        f"Skipping category {record.name} ({record.guid}): "
                        f"no parent at depth {record.depth - 1}"
                    )
                    continue
                del stack[record.depth + 1:]
                row = len(nodes)
                nodes.append(
                    CategoryNode(
                        identity=record.guid,
                        display_name=record.name,
                        depth=record.depth + 2,
                        parent_index=stack[record.depth],
                        kind=kind,
                        is_aggregate=False,
                        currency=record.currency,
                    )
                )
                stack.append(row)
                seen.add(record.guid)
                if record.is_aggregate:
                    flagged.append((row, record))

        for node in nodes:
            if node.parent_index is not None:
                nodes[node.parent_index].is_aggregate = True
        for row, record in flagged:
            if not nodes[row].is_aggregate:
                resolved_logger.warning(
                    f"Category {record.name} ({record.guid}) has no usable "
                    "sub-categories; it is edited as a leaf"
                )
        return cls(nodes, logger=resolved_logger, listener=listener)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[CategoryNode]:
        return iter(self._nodes)

    @property
    def root(self) -> CategoryNode:
        """Return the overall Income-Expenses row."""
        return self._nodes[ROOT_ROW]

    def set_listener(self, listener: CellChangeListener | None) -> None:
        """Replace the cell change notification sink."""
        self._listener = listener

    def node(self, row: int) -> CategoryNode | None:
        """Return the node stored at a row, or None when out of range."""
        if 0 <= row < len(self._nodes):
            return self._nodes[row]
        return None

    def rows(self) -> range:
        """Return every row index in tree order."""
        return range(len(self._nodes))

    def find_row(self, identity: str) -> int | None:
        """Return the row index holding a category identity."""
        return self._rows_by_identity.get(identity)

    def leaf_rows(self) -> list[int]:
        """Return the rows of every directly editable category."""
        return [
            row for row, node in enumerate(self._nodes) if node.is_leaf
        ]

    def children_of(self, row: int) -> list[int]:
        """Return the direct children rows of a row."""
        return [
            index
            for index, node in enumerate(self._nodes)
            if node.parent_index == row
        ]

    def value_at(self, row: int, column: int) -> int | None:
        """Return the month value or, for the totals column, the year total."""
        node = self.node(row)
        if node is None:
            return None
        if column == TOTAL_COLUMN:
            return node.year_total
        if is_month(column):
            return node.month_value(column)
        return None

    def is_cell_editable(self, row: int, column: int) -> bool:
        """Return True for month cells of leaf rows."""
        node = self.node(row)
        return node is not None and node.is_leaf and is_month(column)

    def set_month_value(
        self,
        row: int,
        month: int,
        value: int,
        kind: CategoryKind | None = None,
    ) -> bool:
        """Edit a leaf month and propagate the change to its ancestors.

        The cell is marked dirty when its value actually changes.

        Args:
            row: Row of a non-aggregate category.
            month: Calendar month 1..12.
            value: New signed amount in minor currency units.
            kind: Kind of the originating category; defaults to the row's.

        Returns:
            bool: True when the value changed, False for rejected or no-op
            edits.
        """
        node = self._editable_node(row, month)
        if node is None:
            return False
        if node.month_value(month) == value:
            return False
        self._apply_month_value(row, month, value, kind or node.kind)
        node.dirty[month - 1] = True
        self._notify(row, month)
        self._notify(row, TOTAL_COLUMN)
        return True

    def load_month_value(self, row: int, month: int, value: int) -> bool:
        """Set a persisted leaf value without marking the cell dirty.

        Args:
            row: Row of a non-aggregate category.
            month: Calendar month 1..12.
            value: Stored amount in minor currency units.

        Returns:
            bool: True when the value changed.
        """
        node = self._editable_node(row, month)
        if node is None:
            return False
        if node.month_value(month) == value:
            return False
        self._apply_month_value(row, month, value, node.kind)
        return True

    def mark_changed(self, row: int, month: int, value: bool = True) -> None:
        """Set or clear the unsaved-change flag of a cell."""
        node = self._resolve(row)
        if node is None or not is_month(month):
            return
        node.dirty[month - 1] = value

    def clear_changed(self, row: int, month: int) -> None:
        """Clear the unsaved-change flag of a cell."""
        self.mark_changed(row, month, False)

    def clear_all_changed(self) -> None:
        """Forget every unsaved-change flag."""
        for node in self._nodes:
            node.dirty = [False] * len(node.dirty)

    def dirty_cells(self) -> list[DirtyCell]:
        """Return unsaved leaf cells in tree order."""
        cells = []
        for row, node in enumerate(self._nodes):
            if node.is_aggregate:
                continue
            for month in range(FIRST_MONTH, LAST_MONTH + 1):
                if node.is_dirty(month):
                    cells.append(
                        DirtyCell(
                            row=row,
                            identity=node.identity,
                            month=month,
                            amount=node.month_value(month),
                        )
                    )
        return cells

    def has_dirty_cells(self) -> bool:
        """Return True when any leaf cell holds an unsaved change."""
        return any(
            any(node.dirty) for node in self._nodes if node.is_leaf
        )

    def _editable_node(self, row: int, month: int) -> CategoryNode | None:
        node = self._resolve(row)
        if node is None:
            return None
        if not is_month(month):
            self._logger.warning(
                f"Ignoring edit of {node.display_name}: month {month} "
                "is out of range"
            )
            return None
        if node.is_aggregate:
            self._logger.warning(
                f"Ignoring edit of roll-up row {node.display_name}"
            )
            return None
        return node

    def _apply_month_value(
        self,
        row: int,
        month: int,
        value: int,
        kind: CategoryKind,
    ) -> None:
        node = self._nodes[row]
        previous = node.months[month - 1]
        node.months[month - 1] = value
        node.year_total += value - previous

        if node.parent_index is None:
            return
        parent = self.node(node.parent_index)
        if parent is None:
            self._logger.error(
                f"Aggregation stopped at {node.display_name}: parent row "
                f"{node.parent_index} does not exist"
            )
            return
        if parent.kind is CategoryKind.ROOT and kind is CategoryKind.EXPENSE:
            delta = previous - value
        else:
            delta = value - previous
        self._apply_month_value(
            node.parent_index,
            month,
            parent.months[month - 1] + delta,
            kind,
        )
        self._notify(node.parent_index, month)
        self._notify(node.parent_index, TOTAL_COLUMN)

    def _resolve(self, row: int) -> CategoryNode | None:
        node = self.node(row)
        if node is None:
            self._logger.error(f"Category row {row} does not exist")
        return node

    def _notify(self, row: int, column: int) -> None:
        if self._listener is not None:
            self._listener(row, column)


__all__ = ["CategoryTree", "ROOT_ROW", "is_month"]
