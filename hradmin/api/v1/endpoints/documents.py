"""Document data API: generated rows for printable HR documents."""

import random

from fastapi import APIRouter

from hradmin.api.v1.dependencies import CurrentAdmin
from hradmin.application.services.bank_statement import generate_transactions
from hradmin.schemas.document import BankStatementRequest, BankStatementResponse

router = APIRouter()


@router.post("/bank-statement/transactions", response_model=BankStatementResponse)
async def bank_statement_transactions(body: BankStatementRequest, current_admin: CurrentAdmin):
    """Generate randomized bank statement rows for the date range.

    Pass seed to get the same rows for the same request.
    """
    rng = random.Random(body.seed) if body.seed is not None else None
    statement = generate_transactions(
        body.start_date, body.end_date, body.opening_balance, rng=rng
    )
    return BankStatementResponse.model_validate(statement)
