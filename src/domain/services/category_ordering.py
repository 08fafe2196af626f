"""Turn flat GnuCash accounts into pre-ordered category records."""

from collections.abc import Iterable

from src.domain.models.budget import CategoryRecord
from src.domain.models.gnucash_rows import AccountRow
from src.domain.policies.category_filters import is_budgetable_category
from src.domain.services.normalization import (
    normalize_category_kind,
    normalize_mnemonic,
)


def order_categories(accounts: Iterable[AccountRow]) -> list[CategoryRecord]:
    """Return budgetable Income and Expense categories in pre-order.

    Top-level categories are the Income or Expense accounts whose parent is
    not of the same kind. Siblings are sorted by name (case-insensitive).
    Hidden accounts, invalid names and everything below them are left out.

    Args:
        accounts: Every account of the book, in any order.

    Returns:
        list[CategoryRecord]: Depth-first records, depth 0 at the top level.
    """
    accounts = list(accounts)
    kinds = {
        account.guid: normalize_category_kind(account.account_type)
        for account in accounts
    }
    children: dict[str | None, list[AccountRow]] = {}
    roots: list[AccountRow] = []
    for account in accounts:
        kind = kinds[account.guid]
        if kind is None:
            continue
        if account.parent_guid is not None and (
            kinds.get(account.parent_guid) is kind
        ):
            children.setdefault(account.parent_guid, []).append(account)
        else:
            roots.append(account)

    records: list[CategoryRecord] = []

    def visit(account: AccountRow, depth: int) -> None:
        if not is_budgetable_category(account.name, account.hidden):
            return
        sub_accounts = _sorted_by_name(children.get(account.guid, []))
        records.append(
            CategoryRecord(
                guid=account.guid,
                name=account.name.strip(),
                kind=kinds[account.guid],
                depth=depth,
                is_aggregate=any(
                    is_budgetable_category(child.name, child.hidden)
                    for child in sub_accounts
                ),
                currency=normalize_mnemonic(account.mnemonic),
            )
        )
        for child in sub_accounts:
            visit(child, depth + 1)

    for account in _sorted_by_name(roots):
        visit(account, 0)
    return records


def _sorted_by_name(accounts: list[AccountRow]) -> list[AccountRow]:
    return sorted(
        accounts,
        key=lambda account: ((account.name or "").lower(), account.guid),
    )


__all__ = ["order_categories"]
