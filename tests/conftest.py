"""Shared fixtures for the statement engine tests."""
from __future__ import annotations

from datetime import date
from typing import Any, Callable

import pytest

from statement_engine.context import GenerationContext
from statement_engine.schemas import SalariedParams, SelfEmployedParams

END_DATE = date(2025, 6, 30)


def _identity() -> dict[str, Any]:
    return {
        "name": "Rahul Verma",
        "accountNumber": "50100234567890",
        "ifsc": "HDFC0001234",
        "bankName": "HDFC Bank",
        "address": "12 MG Road, Arera Colony",
        "city": "Bhopal",
        "state": "Madhya Pradesh",
        "branchAddress": "MP Nagar Zone 1, Bhopal",
    }


@pytest.fixture()
def salaried_params() -> Callable[..., SalariedParams]:
    """Build salaried form values, overriding any field by keyword."""

    def factory(**overrides: Any) -> SalariedParams:
        payload = {
            **_identity(),
            "employer": "Infosys",
            "salary_amount": 50000,
            "duration_months": 3,
            "template": "HDFC",
            "starting_balance": 10000,
            "number_of_transactions": 60,
            "statement_end_date": END_DATE,
        }
        payload.update(overrides)
        return SalariedParams.model_validate(payload)

    return factory


@pytest.fixture()
def self_employed_params() -> Callable[..., SelfEmployedParams]:
    """Build self-employed form values, overriding any field by keyword."""

    def factory(**overrides: Any) -> SelfEmployedParams:
        payload = {
            **_identity(),
            "turnover": 1200000,
            "period_months": 6,
            "template": "HDFC",
            "starting_balance": 15000,
            "number_of_transactions": 150,
            "statement_end_date": END_DATE,
        }
        payload.update(overrides)
        return SelfEmployedParams.model_validate(payload)

    return factory


@pytest.fixture()
def ctx() -> GenerationContext:
    return GenerationContext.for_build(42, city="Indore")
