"""Command-line front end for the manager terminal.

Usage::

    bank-terminal cpf 529.982.247-25
    bank-terminal format phone 11 912345678
    bank-terminal --api-url http://bank:8080/api/v1 accounts 529.982.247-25
    bank-terminal statement 42
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from enum import Enum
from typing import Sequence

from bank_terminal.client import BankApi
from bank_terminal.config import TerminalConfig
from bank_terminal.exceptions import (
    BankTerminalError,
    ConfigurationError,
    InvalidIdentifierError,
    RequestFailedError,
)
from bank_terminal.identifiers import (
    format_account_number,
    format_currency,
    format_phone,
    format_postal_code,
    format_tax_id,
    validate_tax_id,
)
from bank_terminal.logging import setup_logging
from bank_terminal.models import GlobalAccount

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_REQUEST_FAILED = 2

FORMATTERS = {
    "cpf": format_tax_id,
    "cep": format_postal_code,
    "account": format_account_number,
}


def _label(value: object) -> str:
    """Display text of an enum member, or of a raw value the enum did not know."""
    return value.value if isinstance(value, Enum) else str(value)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bank-terminal",
        description="Bank manager terminal: identifier checks and backend lookups.",
    )
    parser.add_argument("--api-url", help="Backend base URL (default: $BANK_API_URL)")
    parser.add_argument("--log-level", help="Log level (default: $LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        help="Log format (default: $LOG_FORMAT or standard)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    cpf = sub.add_parser("cpf", help="Validate and format a CPF")
    cpf.add_argument("value")

    fmt = sub.add_parser("format", help="Apply a display mask")
    fmt.add_argument("kind", choices=[*FORMATTERS, "phone"])
    fmt.add_argument("value", help="Value to mask (area code for phone)")
    fmt.add_argument("number", nargs="?", default="", help="Phone number (phone only)")

    accounts = sub.add_parser("accounts", help="List the accounts held by a CPF")
    accounts.add_argument("tax_id")

    statement = sub.add_parser("statement", help="Print an account statement")
    statement.add_argument("account_id", type=int)

    return parser


def cmd_cpf(args: argparse.Namespace) -> int:
    valid = validate_tax_id(args.value)
    print(f"{format_tax_id(args.value)}\t{'valid' if valid else 'invalid'}")
    return EXIT_OK if valid else EXIT_INVALID


def cmd_format(args: argparse.Namespace) -> int:
    if args.kind == "phone":
        print(format_phone(args.value, args.number))
    else:
        print(FORMATTERS[args.kind](args.value))
    return EXIT_OK


def cmd_accounts(api: BankApi, args: argparse.Namespace) -> int:
    customer = api.customers.find_by_tax_id(args.tax_id)
    if customer is None:
        print(f"No customer with CPF {format_tax_id(args.tax_id)}", file=sys.stderr)
        return EXIT_INVALID

    print(f"{customer.full_name} ({format_tax_id(customer.tax_id)})")
    for account in api.accounts.list_by_tax_id(args.tax_id):
        line = (
            f"  {format_account_number(account.number)}  ag {account.branch}  "
            f"{account.KIND.value:<8}  {_label(account.status):<8}  "
            f"{format_currency(account.balance)}"
        )
        if isinstance(account, GlobalAccount):
            line += f"  {format_currency(account.usd_balance, 'USD')}"
        print(line)
    return EXIT_OK


def cmd_statement(api: BankApi, args: argparse.Namespace) -> int:
    for tx in api.transactions.statement(args.account_id):
        print(
            f"{tx.timestamp:%Y-%m-%d %H:%M}  {tx.nsu}  {_label(tx.kind):<22}  "
            f"{format_currency(tx.amount):>16}  {tx.reason or ''}"
        )
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = TerminalConfig.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_INVALID

    setup_logging(
        level=args.log_level or config.logging.level,
        format_type=args.log_format or config.logging.format_type,
        redact_tax_ids=config.logging.redact_tax_ids,
    )

    if args.command == "cpf":
        return cmd_cpf(args)
    if args.command == "format":
        return cmd_format(args)

    api_config = replace(config.api, base_url=args.api_url) if args.api_url else config.api
    try:
        with BankApi(api_config) as api:
            if args.command == "accounts":
                return cmd_accounts(api, args)
            return cmd_statement(api, args)
    except InvalidIdentifierError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID
    except RequestFailedError as e:
        logger.debug("Backend request failed", exc_info=True)
        print(f"Request failed: {e.message}", file=sys.stderr)
        return EXIT_REQUEST_FAILED
    except BankTerminalError as e:
        logger.debug("Backend answer not understood", exc_info=True)
        print(f"Unexpected backend answer: {e}", file=sys.stderr)
        return EXIT_REQUEST_FAILED


if __name__ == "__main__":
    sys.exit(main())
