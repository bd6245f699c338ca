"""Manager terminal toolkit for the bank backend.

Identifier validation and display masks live in ``bank_terminal.identifiers``;
the backend client in ``bank_terminal.client``.
"""

from bank_terminal.client import ApiClient, BankApi
from bank_terminal.identifiers import (
    format_account_number,
    format_currency,
    format_phone,
    format_postal_code,
    format_tax_id,
    validate_tax_id,
)
from bank_terminal.session import ManagerSession

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "BankApi",
    "ManagerSession",
    "format_account_number",
    "format_currency",
    "format_phone",
    "format_postal_code",
    "format_tax_id",
    "validate_tax_id",
]
