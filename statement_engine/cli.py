"""Generate a synthetic bank statement from a JSON parameter file.

Example::

    statement-engine params.json --seed 7 --format csv --output statement.csv
"""
from __future__ import annotations

import argparse
import csv
import io
import json
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from .core.config import get_settings
from .core.formatting import format_inr, humanize_inr
from .core.log import LoggingConfig, get_logger, init_logging, log_context
from .exceptions import StatementEngineError
from .ledger import generate_statement
from .models import Statement, UserType, fmt_amount
from .schemas import TEMPLATES, OcrSeedData, parse_params, prefill_from_ocr

logger = get_logger(__name__)

CSV_COLUMNS = ("id", "date", "description", "reference", "debit", "credit", "balance", "kind")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="statement-engine", description=__doc__)
    parser.add_argument("params", type=str, help="JSON file with form values ('-' for stdin)")
    parser.add_argument(
        "--user-type",
        choices=[user_type.value for user_type in UserType],
        default=None,
        help="Form kind (inferred from the presence of 'turnover' when omitted)",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.default_seed, help="Random seed for reproducibility"
    )
    parser.add_argument("--template", choices=TEMPLATES, default=None, help="Override the bank style")
    parser.add_argument(
        "--ocr", type=str, default=None, help="OCR seed data JSON used to pre-fill missing fields"
    )
    parser.add_argument("--format", choices=("json", "csv"), default="json", help="Output format")
    parser.add_argument("--output", type=str, default=None, help="Write to this file instead of stdout")
    parser.add_argument(
        "--today", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD)"
    )
    parser.add_argument("--log-level", type=str, default=settings.logging.level, help="Logging level")
    return parser.parse_args(argv)


def _read_json(source: str) -> dict[str, Any]:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as handle:
        return json.load(handle)


def load_payload(params_path: str, ocr_path: Optional[str] = None) -> dict[str, Any]:
    """Merge OCR pre-fill values under the explicit form values."""

    payload = _read_json(params_path)
    if ocr_path is None:
        return payload
    prefill = prefill_from_ocr(OcrSeedData.model_validate(_read_json(ocr_path)))
    # Form values win over OCR values, whichever key style they use.
    merged = {
        key: value
        for key, value in prefill.items()
        if key not in payload and to_camel(key) not in payload
    }
    merged.update(payload)
    return merged


def render_csv(statement: Statement) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_COLUMNS)
    for txn in statement.transactions:
        writer.writerow(
            [
                txn.id,
                txn.date.isoformat(timespec="seconds"),
                txn.description,
                txn.reference,
                fmt_amount(txn.debit),
                fmt_amount(txn.credit),
                fmt_amount(txn.balance),
                txn.kind.value,
            ]
        )
    return buffer.getvalue()


def render_json(statement: Statement) -> str:
    return json.dumps(statement.to_dict(), indent=2, ensure_ascii=False)


def log_summary(statement: Statement) -> None:
    meta = statement.meta
    logger.info(
        "%s statement %s..%s: %s rows",
        meta.template,
        meta.statement_period_start,
        meta.statement_period_end,
        f"{len(statement.transactions):,}",
    )
    logger.info(
        "Opening %s, credits %s, debits %s, closing %s",
        format_inr(statement.opening_balance, symbol="₹"),
        humanize_inr(statement.total_credits, short=True),
        humanize_inr(statement.total_debits, short=True),
        format_inr(statement.closing_balance, symbol="₹"),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    init_logging(LoggingConfig.from_settings(get_settings().logging, level=args.log_level))

    with log_context.scoped(job="generate_statement"):
        try:
            payload = load_payload(args.params, args.ocr)
            if args.template:
                payload["template"] = args.template
            params = parse_params(payload, args.user_type)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Could not read parameters: %s", exc)
            return 2
        except (ValidationError, ValueError) as exc:
            logger.error("Invalid parameters: %s", exc)
            return 2

        try:
            statement = generate_statement(params, args.seed, today=args.today)
        except StatementEngineError as exc:
            logger.error("Generation failed: %s", exc)
            return 1

        rendered = render_csv(statement) if args.format == "csv" else render_json(statement)
        if args.output:
            Path(args.output).write_text(rendered, encoding="utf-8")
            logger.info("Wrote %s", args.output)
        else:
            sys.stdout.write(rendered)
            if not rendered.endswith("\n"):
                sys.stdout.write("\n")
        log_summary(statement)
    return 0


if __name__ == "__main__":
    sys.exit(main())
