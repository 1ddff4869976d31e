"""DTOs for generated bank statement data."""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal

from hradmin.domain.enums import TransactionType


@dataclass(frozen=True)
class BankTransaction:
    """One statement row; exactly one of debit/credit is non-zero."""

    date: dt.date
    description: str
    reference: str
    type: TransactionType
    debit: Decimal
    credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class BankStatementResult:
    opening_balance: Decimal
    closing_balance: Decimal
    transactions: tuple[BankTransaction, ...]
