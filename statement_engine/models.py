"""Domain objects produced by the statement engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: int | float | str | Decimal) -> Decimal:
    """Convert ``value`` to a paise-quantised ``Decimal``."""

    if isinstance(value, float):
        value = repr(value)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def fmt_amount(value: Decimal) -> str:
    return f"{value:.2f}"


def iso_datetime(value: datetime | date) -> str:
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    return value.isoformat()


class UserType(str, enum.Enum):
    SALARIED = "salaried"
    SELF_EMPLOYED = "selfEmployed"


class TransactionKind(str, enum.Enum):
    """Origin of a ledger row."""

    SALARY = "salary"
    TURNOVER = "turnover"
    DEBIT = "debit"
    CREDIT = "credit"
    INTEREST = "interest"
    OPENING_ADJUSTMENT = "opening_adjustment"
    CLOSING_ADJUSTMENT = "closing_adjustment"


@dataclass(frozen=True, slots=True)
class Transaction:
    """One ledger row. Exactly one of ``debit`` / ``credit`` is non-zero."""

    id: str
    date: datetime
    description: str
    reference: str
    debit: Decimal
    credit: Decimal
    balance: Decimal
    kind: TransactionKind

    def __post_init__(self) -> None:
        if self.debit < 0 or self.credit < 0:
            raise ValueError("debit and credit must be non-negative")
        if (self.debit > 0) == (self.credit > 0):
            raise ValueError("exactly one of debit or credit must be non-zero")

    @property
    def is_credit(self) -> bool:
        return self.credit > 0

    @property
    def amount(self) -> Decimal:
        """Signed movement applied to the balance."""

        return self.credit - self.debit

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": iso_datetime(self.date),
            "description": self.description,
            "reference": self.reference,
            "debit": float(self.debit),
            "credit": float(self.credit),
            "balance": float(self.balance),
            "kind": self.kind.value,
        }


@dataclass(frozen=True, slots=True)
class StatementDetails:
    """Identity and location of the fictitious account holder."""

    name: str
    account_number: str
    ifsc: str
    bank_name: str
    starting_balance: Decimal
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    bank_branch: Optional[str] = None
    branch_address: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "accountNumber": self.account_number,
            "ifsc": self.ifsc,
            "bankName": self.bank_name,
            "startingBalance": float(self.starting_balance),
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "pincode": self.pincode,
            "bankBranch": self.bank_branch,
            "branchAddress": self.branch_address,
            "phoneNumber": self.phone_number,
            "email": self.email,
        }
        return {key: value for key, value in payload.items() if value is not None}


@dataclass(frozen=True, slots=True)
class StatementMeta:
    generated_at: datetime
    template: str
    statement_period_start: date
    statement_period_end: date
    user_type: UserType
    config_hash: str
    seed: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "generatedAt": iso_datetime(self.generated_at),
            "template": self.template,
            "statementPeriodStart": iso_datetime(self.statement_period_start),
            "statementPeriodEnd": iso_datetime(self.statement_period_end),
            "userType": self.user_type.value,
            "configHash": self.config_hash,
            "seed": self.seed,
        }


@dataclass(frozen=True, slots=True)
class Statement:
    """Aggregate root: one generated statement and the rows it owns."""

    id: str
    details: StatementDetails
    meta: StatementMeta
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    @property
    def opening_balance(self) -> Decimal:
        return self.details.starting_balance

    @property
    def closing_balance(self) -> Decimal:
        if not self.transactions:
            return self.details.starting_balance
        return self.transactions[-1].balance

    @property
    def total_credits(self) -> Decimal:
        return sum((txn.credit for txn in self.transactions), ZERO)

    @property
    def total_debits(self) -> Decimal:
        return sum((txn.debit for txn in self.transactions), ZERO)

    def of_kind(self, *kinds: TransactionKind) -> list[Transaction]:
        return [txn for txn in self.transactions if txn.kind in kinds]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "details": self.details.to_dict(),
            "meta": self.meta.to_dict(),
            "transactions": [txn.to_dict() for txn in self.transactions],
        }


@dataclass(frozen=True, slots=True)
class GenerationOptions:
    """The only input that differs between two runs over the same parameters."""

    seed: int
