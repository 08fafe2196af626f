"""Domain models for GnuCash row data."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AccountRow:
    """Flat GnuCash account as read by a category source."""

    guid: str
    name: str
    account_type: str
    parent_guid: str | None
    hidden: bool = False
    mnemonic: str | None = None


@dataclass(frozen=True)
class SplitAmountRow:
    """Split amount posted to an account on a date."""

    account_guid: str
    post_date: date
    amount: Decimal


__all__ = ["AccountRow", "SplitAmountRow"]
