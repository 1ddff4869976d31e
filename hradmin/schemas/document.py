"""Document data API schemas (bank statement transactions)."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from hradmin.domain.enums import TransactionType


class BankStatementRequest(BaseModel):
    """Request body for generating bank statement rows."""

    start_date: dt.date
    end_date: dt.date
    opening_balance: Decimal = Field(default=Decimal("50000"), ge=0, decimal_places=2)
    seed: int | None = Field(default=None, description="Seed for reproducible output")


class BankTransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    description: str
    reference: str
    type: TransactionType
    debit: Decimal
    credit: Decimal
    balance: Decimal


class BankStatementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    opening_balance: Decimal
    closing_balance: Decimal
    transactions: list[BankTransactionResponse]
