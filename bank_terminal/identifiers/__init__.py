"""Identifier validation and display formatting."""

from bank_terminal.identifiers.cpf import (
    compute_check_digits,
    format_tax_id,
    mask_tax_id,
    only_digits,
    validate_tax_id,
)
from bank_terminal.identifiers.currency import format_currency, parse_currency
from bank_terminal.identifiers.masks import (
    format_account_number,
    format_phone,
    format_postal_code,
)

__all__ = [
    "compute_check_digits",
    "format_account_number",
    "format_currency",
    "format_phone",
    "format_postal_code",
    "format_tax_id",
    "mask_tax_id",
    "only_digits",
    "parse_currency",
    "validate_tax_id",
]
