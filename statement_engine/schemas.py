"""Input schemas for statement generation.

Both parameter models accept the camelCase keys produced by the mobile form
as well as snake_case keys, so a saved form payload can be fed to the CLI
unchanged.
"""
from __future__ import annotations

import re
from datetime import date
from decimal import Decimal
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .models import StatementDetails, UserType

TEMPLATES = (
    "PNB", "SBI", "HDFC", "ICICI", "AXIS", "KOTAK", "IDFC", "INDUSIND",
    "CBI", "YES", "BOB", "UCO", "IOB", "CANARA", "UNION",
)
Template = Literal[
    "PNB", "SBI", "HDFC", "ICICI", "AXIS", "KOTAK", "IDFC", "INDUSIND",
    "CBI", "YES", "BOB", "UCO", "IOB", "CANARA", "UNION",
]
DEFAULT_TEMPLATE = "HDFC"
OTHER_EMPLOYER = "Other"

IFSC_PATTERN = re.compile(r"^[A-Z]{4}0[A-Z0-9]{6}$", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_CLOSING_BALANCE = Decimal("1000")
SHORT_STATEMENT_MONTHS = 3
SHORT_STATEMENT_MAX_TRANSACTIONS = 1000
LONG_STATEMENT_MAX_TRANSACTIONS = 5000

# Checked in order; the first keyword found in the upper-cased bank name wins.
BANK_NAME_KEYWORDS = (
    (("SBI", "STATE BANK"), "SBI"),
    (("HDFC",), "HDFC"),
    (("ICICI",), "ICICI"),
    (("AXIS",), "AXIS"),
    (("KOTAK",), "KOTAK"),
    (("IDFC",), "IDFC"),
    (("INDUSIND",), "INDUSIND"),
    (("PNB", "PUNJAB NATIONAL"), "PNB"),
    (("YES",), "YES"),
    (("BOB", "BARODA"), "BOB"),
    (("UCO",), "UCO"),
    (("IOB", "INDIAN OVERSEAS"), "IOB"),
    (("CANARA",), "CANARA"),
    (("UNION",), "UNION"),
    (("CBI", "CENTRAL BANK"), "CBI"),
)

IFSC_PREFIXES = {
    "SBIN": "SBI",
    "HDFC": "HDFC",
    "ICIC": "ICICI",
    "UTIB": "AXIS",
    "KKBK": "KOTAK",
    "IDFB": "IDFC",
    "INDB": "INDUSIND",
    "PUNB": "PNB",
    "YESB": "YES",
    "BARB": "BOB",
    "UCBA": "UCO",
    "IOBA": "IOB",
    "CNRB": "CANARA",
    "UBIN": "UNION",
    "CBIN": "CBI",
}


def max_transactions(months: int) -> int:
    if months == SHORT_STATEMENT_MONTHS:
        return SHORT_STATEMENT_MAX_TRANSACTIONS
    return LONG_STATEMENT_MAX_TRANSACTIONS


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class AccountHolder(_Schema):
    """Identity fields shared by both kinds of statement."""

    name: str = Field(min_length=3)
    account_number: str = Field(min_length=6, max_length=18)
    ifsc: str
    bank_name: str = Field(min_length=3)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    bank_branch: Optional[str] = None
    branch_address: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None

    template: Template = DEFAULT_TEMPLATE
    starting_balance: Decimal = Field(ge=0, decimal_places=2)
    number_of_transactions: int = Field(ge=0)
    closing_balance: Optional[Decimal] = Field(default=None, decimal_places=2)
    statement_start_date: Optional[date] = None
    statement_end_date: Optional[date] = None

    @field_validator(
        "address",
        "city",
        "state",
        "pincode",
        "bank_branch",
        "branch_address",
        "phone_number",
        "email",
        "closing_balance",
        mode="before",
    )
    @classmethod
    def _empty_as_missing(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("ifsc")
    @classmethod
    def _check_ifsc(cls, value: str) -> str:
        if not IFSC_PATTERN.match(value):
            raise ValueError("Invalid IFSC")
        return value.upper()

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email")
        return value

    @field_validator("address")
    @classmethod
    def _check_address(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) < 10:
            raise ValueError("Enter complete address (minimum 10 characters)")
        return value

    @field_validator("template", mode="before")
    @classmethod
    def _upper_template(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("closing_balance")
    @classmethod
    def _check_closing_balance(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        if value is not None and value < MIN_CLOSING_BALANCE:
            raise ValueError("Minimum closing balance is ₹1,000")
        return value

    def _check_dates(self) -> None:
        today = date.today()
        start, end = self.statement_start_date, self.statement_end_date
        if end is not None and end > today:
            raise ValueError("End date cannot be in the future")
        if start is not None and start > today:
            raise ValueError("Start date cannot be in the future")
        if start is not None and end is not None and end <= start:
            raise ValueError("End date must be after start date")

    def _check_transaction_cap(self, months: int) -> None:
        cap = max_transactions(months)
        if self.number_of_transactions > cap:
            raise ValueError(f"Maximum {cap} transactions for {months} months")

    def to_details(self) -> StatementDetails:
        return StatementDetails(
            name=self.name,
            account_number=self.account_number,
            ifsc=self.ifsc,
            bank_name=self.bank_name,
            starting_balance=self.starting_balance,
            address=self.address,
            city=self.city,
            state=self.state,
            pincode=self.pincode,
            bank_branch=self.bank_branch,
            branch_address=self.branch_address,
            phone_number=self.phone_number,
            email=self.email,
        )


class SalariedParams(AccountHolder):
    """Form values for a salaried account holder."""

    employer: str = Field(min_length=1)
    custom_employer: Optional[str] = None
    salary_amount: Decimal = Field(gt=0, decimal_places=2)
    duration_months: int = Field(ge=3, le=6)

    @model_validator(mode="after")
    def _check_consistency(self) -> "SalariedParams":
        if self.employer == OTHER_EMPLOYER and not (self.custom_employer or "").strip():
            raise ValueError("Enter employer name")
        self._check_transaction_cap(self.months)
        self._check_dates()
        return self

    @property
    def months(self) -> int:
        return self.duration_months

    @property
    def user_type(self) -> UserType:
        return UserType.SALARIED


class SelfEmployedParams(AccountHolder):
    """Form values for a self-employed account holder."""

    turnover: Decimal = Field(gt=0, decimal_places=2)
    period_months: Literal[3, 6]

    @field_validator("period_months", mode="before")
    @classmethod
    def _parse_period(cls, value: Any) -> Any:
        # The form submits the period as a string choice.
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return value

    @model_validator(mode="after")
    def _check_consistency(self) -> "SelfEmployedParams":
        self._check_transaction_cap(self.months)
        self._check_dates()
        return self

    @property
    def months(self) -> int:
        return self.period_months

    @property
    def user_type(self) -> UserType:
        return UserType.SELF_EMPLOYED


StatementParams = Union[SalariedParams, SelfEmployedParams]


def parse_params(payload: dict[str, Any], user_type: Optional[str] = None) -> StatementParams:
    """Validate ``payload`` as salaried or self-employed form values.

    Without an explicit ``user_type`` the presence of ``turnover`` selects the
    self-employed form.
    """

    if user_type is None:
        user_type = (
            UserType.SELF_EMPLOYED.value if "turnover" in payload else UserType.SALARIED.value
        )
    if user_type in (UserType.SELF_EMPLOYED.value, "self_employed", "self-employed"):
        return SelfEmployedParams.model_validate(payload)
    if user_type == UserType.SALARIED.value:
        return SalariedParams.model_validate(payload)
    raise ValueError(f"unknown user type {user_type!r}")


class OcrSeedData(_Schema):
    """Fields an upstream OCR pass may have read off a scanned statement."""

    name: Optional[str] = None
    account_number: Optional[str] = None
    ifsc: Optional[str] = None
    bank_name: Optional[str] = None
    starting_balance: Optional[Decimal] = None
    ending_balance: Optional[Decimal] = None
    branch_name: Optional[str] = None
    branch_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


def infer_template(bank_name: Optional[str], ifsc: Optional[str] = None) -> str:
    """Guess the bank style from a bank name, then from the IFSC prefix."""

    if bank_name:
        upper = bank_name.upper()
        for keywords, template in BANK_NAME_KEYWORDS:
            if any(keyword in upper for keyword in keywords):
                return template
    if ifsc:
        template = IFSC_PREFIXES.get(ifsc.strip().upper()[:4])
        if template:
            return template
    return DEFAULT_TEMPLATE


def prefill_from_ocr(ocr: OcrSeedData) -> dict[str, Any]:
    """Map OCR seed data onto form defaults (snake_case keys, no ``None`` values)."""

    template = infer_template(ocr.bank_name, ocr.ifsc)
    values: dict[str, Any] = {
        "name": ocr.name,
        "account_number": ocr.account_number,
        "ifsc": ocr.ifsc,
        "bank_name": ocr.bank_name or f"{template} Bank",
        "address": ocr.branch_address,
        "city": ocr.city,
        "state": ocr.state,
        "pincode": ocr.pincode,
        "bank_branch": ocr.branch_name,
        "branch_address": ocr.branch_address,
        "phone_number": ocr.phone,
        "email": ocr.email,
        "starting_balance": ocr.starting_balance,
        "closing_balance": ocr.ending_balance,
        "template": template,
    }
    return {key: value for key, value in values.items() if value is not None}
