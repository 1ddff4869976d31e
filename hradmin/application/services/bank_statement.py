"""Randomized transaction rows for bank statement documents.

Produces plausible-looking UPI/NEFT/IMPS style rows between two dates with
a running balance. Pass a seeded random.Random for reproducible output.
"""

from __future__ import annotations

import random
import string
from datetime import date, timedelta
from decimal import ROUND_DOWN, Decimal

from hradmin.application.dtos.bank_statement import (
    BankStatementResult,
    BankTransaction,
)
from hradmin.domain.enums import TransactionType
from hradmin.domain.exceptions import ValidationException

MAX_STATEMENT_DAYS = 366
MIN_TRANSACTIONS_PER_DAY = 5
MAX_TRANSACTIONS_PER_DAY = 8
DEBIT_PROBABILITY = 0.7
MAX_DEBIT_AMOUNT = 5000
MAX_CREDIT_AMOUNT = 15000
MIN_AMOUNT = 10

_TYPES = (
    "UPI/DR/",
    "UPI/CR/",
    "NEFT/",
    "IMPS/",
    "ATM/WDL/",
    "POS/",
    "SALARY/",
    "CHQ/",
    "RTGS/",
    "INTERNET BANKING/",
    "MOBILE BANKING/",
)
_MERCHANTS = (
    "AMAZON PAY",
    "FLIPKART",
    "SWIGGY",
    "ZOMATO",
    "UBER",
    "OLA",
    "AIRTEL",
    "JIO",
    "VODAFONE",
    "NETFLIX",
    "HOTSTAR",
    "BIGBASKET",
    "DOMINOS",
    "KFC",
    "MCDONALDS",
    "FOOD DELIVERY",
    "ELECTRICITY BILL",
    "WATER BILL",
    "GAS BILL",
    "RENT PAYMENT",
    "SHOPPING",
)
_BANKS = ("HDFC", "ICICI", "SBI", "AXIS", "KOTAK", "YESB", "UBI", "BOB", "PNB", "CANARA")
_REF_PREFIXES = ("AUS", "REF", "TXN", "CHQ", "NEFT", "UTR", "PAY")
_REF_CHARS = string.ascii_uppercase + string.digits
_CENT = Decimal("0.01")


def _description(rng: random.Random) -> str:
    ref = str(rng.randrange(10**12)).zfill(12)
    tail = str(rng.randrange(10**9)).zfill(9)
    return f"{rng.choice(_TYPES)}{ref}/{rng.choice(_MERCHANTS)}/{rng.choice(_BANKS)}/{tail}"


def _reference(rng: random.Random, year: int) -> str:
    suffix = "".join(rng.choice(_REF_CHARS) for _ in range(10))
    return f"{rng.choice(_REF_PREFIXES)}{year}{str(rng.randrange(1000)).zfill(3)}{suffix}"


def _amount(rng: random.Random, maximum: int) -> Decimal:
    cents = rng.randrange(MIN_AMOUNT * 100, maximum * 100)
    return (Decimal(cents) / 100).quantize(_CENT, rounding=ROUND_DOWN)


def generate_transactions(
    start_date: date,
    end_date: date,
    opening_balance: Decimal | int | float = Decimal("50000"),
    rng: random.Random | None = None,
) -> BankStatementResult:
    """Generate 5-8 rows per day from start_date to end_date inclusive.

    About 70% of rows are debits (up to 5,000); credits go up to 15,000. A
    debit larger than the running balance is written as a credit instead, so
    the balance never goes negative. Debits carry a cheque/reference number,
    credits an empty one.

    Raises:
        ValidationException: If the range is reversed, too long, or the
            opening balance is negative.
    """
    if end_date < start_date:
        raise ValidationException("end_date must not be before start_date", field="end_date")
    if (end_date - start_date).days + 1 > MAX_STATEMENT_DAYS:
        raise ValidationException(
            f"Statement period must not exceed {MAX_STATEMENT_DAYS} days", field="end_date"
        )
    opening = Decimal(str(opening_balance)).quantize(_CENT)
    if opening < 0:
        raise ValidationException("opening_balance must not be negative", field="opening_balance")
    rng = rng or random.Random()

    balance = opening
    rows: list[BankTransaction] = []
    day = start_date
    while day <= end_date:
        for _ in range(rng.randint(MIN_TRANSACTIONS_PER_DAY, MAX_TRANSACTIONS_PER_DAY)):
            is_debit = rng.random() < DEBIT_PROBABILITY
            amount = _amount(rng, MAX_DEBIT_AMOUNT if is_debit else MAX_CREDIT_AMOUNT)
            if is_debit and amount > balance:
                is_debit = False
            if is_debit:
                balance -= amount
                rows.append(
                    BankTransaction(
                        date=day,
                        description=_description(rng),
                        reference=_reference(rng, day.year),
                        type=TransactionType.DEBIT,
                        debit=amount,
                        credit=Decimal("0.00"),
                        balance=balance,
                    )
                )
            else:
                balance += amount
                rows.append(
                    BankTransaction(
                        date=day,
                        description=_description(rng),
                        reference="",
                        type=TransactionType.CREDIT,
                        debit=Decimal("0.00"),
                        credit=amount,
                        balance=balance,
                    )
                )
        day += timedelta(days=1)
    return BankStatementResult(
        opening_balance=opening,
        closing_balance=balance,
        transactions=tuple(rows),
    )
