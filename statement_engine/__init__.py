"""Deterministic synthetic bank statement generation."""

from .exceptions import ConfigurationError, InvalidParametersError, StatementEngineError
from .ledger import build_statement, generate_statement, regenerate_statement
from .models import GenerationOptions, Statement, StatementDetails, StatementMeta, Transaction
from .schemas import OcrSeedData, SalariedParams, SelfEmployedParams, prefill_from_ocr

__all__ = [
    "ConfigurationError",
    "GenerationOptions",
    "InvalidParametersError",
    "OcrSeedData",
    "SalariedParams",
    "SelfEmployedParams",
    "Statement",
    "StatementDetails",
    "StatementEngineError",
    "StatementMeta",
    "Transaction",
    "build_statement",
    "generate_statement",
    "prefill_from_ocr",
    "regenerate_statement",
]
