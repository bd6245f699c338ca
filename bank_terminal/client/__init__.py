"""HTTP client for the bank backend."""

from bank_terminal.client.api import BankApi
from bank_terminal.client.http import ApiClient

__all__ = ["ApiClient", "BankApi"]
