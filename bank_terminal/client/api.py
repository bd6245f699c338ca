"""Facade grouping every backend resource over one client."""

from __future__ import annotations

from typing import Any

import httpx

from bank_terminal.client.accounts import AccountResource
from bank_terminal.client.addresses import AddressResource
from bank_terminal.client.auto_debits import AutoDebitResource
from bank_terminal.client.customers import CustomerResource
from bank_terminal.client.http import ApiClient
from bank_terminal.client.managers import ManagerResource
from bank_terminal.client.transactions import TransactionResource
from bank_terminal.config import ApiConfig


class BankApi:
    """Entry point to the backend.

    Usage::

        with BankApi(ApiConfig(base_url="http://bank:8080/api/v1")) as api:
            session = api.managers.login(7, "secret")
            accounts = api.accounts.list_by_tax_id("529.982.247-25")
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.client = ApiClient(config, transport=transport)
        self.managers = ManagerResource(self.client)
        self.customers = CustomerResource(self.client)
        self.addresses = AddressResource(self.client)
        self.accounts = AccountResource(self.client)
        self.transactions = TransactionResource(self.client)
        self.auto_debits = AutoDebitResource(self.client)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> BankApi:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
