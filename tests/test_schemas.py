"""Tests for form parameter validation and OCR pre-fill."""
from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from statement_engine.models import UserType
from statement_engine.schemas import (
    OcrSeedData,
    SalariedParams,
    SelfEmployedParams,
    infer_template,
    parse_params,
    prefill_from_ocr,
)


def _salaried_payload(**overrides):
    payload = {
        "name": "Priya Nair",
        "accountNumber": "123456789012",
        "ifsc": "sbin0004567",
        "bankName": "State Bank of India",
        "employer": "TCS",
        "salaryAmount": 65000,
        "durationMonths": 3,
        "template": "sbi",
        "startingBalance": 8000,
        "numberOfTransactions": 90,
    }
    payload.update(overrides)
    return payload


def test_camel_case_payload_is_accepted() -> None:
    params = SalariedParams.model_validate(_salaried_payload())

    assert params.account_number == "123456789012"
    assert params.ifsc == "SBIN0004567"
    assert params.template == "SBI"
    assert params.salary_amount == Decimal("65000")
    assert params.user_type is UserType.SALARIED
    assert params.months == 3


def test_snake_case_payload_is_accepted() -> None:
    params = SalariedParams(
        name="Priya Nair",
        account_number="123456789012",
        ifsc="SBIN0004567",
        bank_name="SBI",
        employer="TCS",
        salary_amount=Decimal("65000"),
        duration_months=4,
        starting_balance=Decimal("0"),
        number_of_transactions=0,
    )
    assert params.template == "HDFC"


def test_blank_optional_fields_become_missing() -> None:
    params = SalariedParams.model_validate(
        _salaried_payload(email="", address="  ", closingBalance="")
    )
    assert params.email is None
    assert params.address is None
    assert params.closing_balance is None


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"ifsc": "SBIN1234567"}, "Invalid IFSC"),
        ({"email": "not-an-email"}, "Invalid email"),
        ({"address": "Short"}, "minimum 10 characters"),
        ({"employer": "Other"}, "Enter employer name"),
        ({"numberOfTransactions": 1001}, "Maximum 1000 transactions for 3 months"),
        ({"closingBalance": 500}, "Minimum closing balance"),
        ({"template": "XYZ"}, "template"),
        ({"durationMonths": 7}, "duration_months"),
        ({"startingBalance": -1}, "starting_balance"),
        ({"startingBalance": "10000.005"}, "starting_balance"),
        ({"salaryAmount": "0.004"}, "salary_amount"),
        ({"closingBalance": "5000.125"}, "closing_balance"),
    ],
)
def test_invalid_salaried_values_are_rejected(overrides, message) -> None:
    with pytest.raises(ValidationError) as excinfo:
        SalariedParams.model_validate(_salaried_payload(**overrides))
    text = str(excinfo.value)
    assert message in text or message.replace("_", "") in text.lower().replace("_", "")


def test_longer_statements_allow_more_transactions() -> None:
    params = SalariedParams.model_validate(
        _salaried_payload(durationMonths=6, numberOfTransactions=4000)
    )
    assert params.number_of_transactions == 4000


def test_custom_employer_satisfies_other() -> None:
    params = SalariedParams.model_validate(
        _salaried_payload(employer="Other", customEmployer="Acme Labs")
    )
    assert params.custom_employer == "Acme Labs"


def test_date_rules() -> None:
    tomorrow = date.today() + timedelta(days=1)
    with pytest.raises(ValidationError, match="End date cannot be in the future"):
        SalariedParams.model_validate(_salaried_payload(statementEndDate=tomorrow))
    with pytest.raises(ValidationError, match="Start date cannot be in the future"):
        SalariedParams.model_validate(_salaried_payload(statementStartDate=tomorrow))
    with pytest.raises(ValidationError, match="End date must be after start date"):
        SalariedParams.model_validate(
            _salaried_payload(statementStartDate="2025-05-01", statementEndDate="2025-05-01")
        )


def test_self_employed_period_accepts_form_strings() -> None:
    payload = _salaried_payload(turnover=900000, periodMonths="6", numberOfTransactions=3000)
    params = SelfEmployedParams.model_validate(payload)

    assert params.period_months == 6
    assert params.months == 6
    assert params.user_type is UserType.SELF_EMPLOYED


def test_self_employed_period_must_be_three_or_six() -> None:
    with pytest.raises(ValidationError):
        SelfEmployedParams.model_validate(_salaried_payload(turnover=900000, periodMonths=4))


def test_self_employed_cap_follows_the_period() -> None:
    payload = _salaried_payload(turnover=900000, periodMonths="3", numberOfTransactions=1001)
    with pytest.raises(ValidationError, match="Maximum 1000 transactions for 3 months"):
        SelfEmployedParams.model_validate(payload)


def test_turnover_is_limited_to_paise() -> None:
    with pytest.raises(ValidationError, match="turnover"):
        SelfEmployedParams.model_validate(
            _salaried_payload(turnover="900000.001", periodMonths=6, numberOfTransactions=300)
        )


def test_parse_params_picks_form_by_turnover() -> None:
    assert isinstance(parse_params(_salaried_payload()), SalariedParams)
    assert isinstance(
        parse_params(_salaried_payload(turnover=900000, periodMonths=3)), SelfEmployedParams
    )
    assert isinstance(
        parse_params(_salaried_payload(periodMonths=3, turnover=1), "selfEmployed"),
        SelfEmployedParams,
    )
    with pytest.raises(ValueError):
        parse_params(_salaried_payload(), "retired")


def test_to_details_carries_identity_fields() -> None:
    params = SalariedParams.model_validate(_salaried_payload(city="Kochi", pincode="682001"))
    details = params.to_details()

    assert details.name == "Priya Nair"
    assert details.starting_balance == Decimal("8000")
    assert details.to_dict()["city"] == "Kochi"
    assert "email" not in details.to_dict()


@pytest.mark.parametrize(
    "bank_name, ifsc, template",
    [
        ("State Bank of India", None, "SBI"),
        ("Punjab National Bank", None, "PNB"),
        ("Bank of Baroda", None, "BOB"),
        ("Indian Overseas Bank", None, "IOB"),
        ("Central Bank of India", None, "CBI"),
        ("Yes Bank Ltd", None, "YES"),
        (None, "UTIB0000123", "AXIS"),
        ("Some Cooperative Bank", "CNRB0001234", "CANARA"),
        (None, None, "HDFC"),
    ],
)
def test_infer_template(bank_name, ifsc, template) -> None:
    assert infer_template(bank_name, ifsc) == template


def test_prefill_from_ocr_maps_fields() -> None:
    ocr = OcrSeedData.model_validate(
        {
            "name": "Anil Kumar",
            "ifsc": "KKBK0000958",
            "branchName": "Andheri East",
            "branchAddress": "Chakala, Andheri East, Mumbai",
            "phone": "02228381234",
            "startingBalance": 12500.5,
            "endingBalance": 30400,
        }
    )
    values = prefill_from_ocr(ocr)

    assert values["template"] == "KOTAK"
    assert values["bank_name"] == "KOTAK Bank"
    assert values["bank_branch"] == "Andheri East"
    assert values["phone_number"] == "02228381234"
    assert values["closing_balance"] == Decimal("30400")
    assert values["address"] == "Chakala, Andheri East, Mumbai"
    assert "email" not in values
