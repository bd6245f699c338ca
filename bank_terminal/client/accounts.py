"""Account endpoints (``/contas``)."""

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Any

from bank_terminal.client.base import Resource
from bank_terminal.exceptions import InvalidTaxIdError, RequestFailedError
from bank_terminal.identifiers import only_digits, validate_tax_id
from bank_terminal.models import (
    Account,
    AccountUpdateRequest,
    AccountUpdateResponse,
    CheckingAccount,
    CheckingAccountRequest,
    GlobalAccount,
    GlobalAccountRequest,
    SavingsAccount,
    SavingsAccountRequest,
    YouthAccount,
    YouthAccountRequest,
)
from bank_terminal.serialization import parse_account, to_payload

logger = logging.getLogger(__name__)

OpeningRequest = (
    CheckingAccountRequest | SavingsAccountRequest | YouthAccountRequest | GlobalAccountRequest
)


def _clean_tax_id(tax_id: str) -> str:
    if not validate_tax_id(tax_id):
        raise InvalidTaxIdError(tax_id)
    return only_digits(tax_id)


def _parse(data: Any) -> Account:
    if data is None:
        raise RequestFailedError("Empty response where an account was expected")
    return parse_account(data)


class AccountResource(Resource):
    """Account opening, lookup and closure."""

    def _open(self, path: str, request: OpeningRequest) -> dict[str, Any]:
        request = replace(
            request, holder_tax_ids=[_clean_tax_id(cpf) for cpf in request.holder_tax_ids]
        )
        data = self._client.post(path, to_payload(request))
        if data is None:
            raise RequestFailedError(f"Empty response from {path}")
        logger.info("Opened account %s at %s", data.get("numeroConta"), path)
        return data

    def open_checking(self, request: CheckingAccountRequest) -> CheckingAccount:
        return self._one(CheckingAccount, self._open("/contas/corrente", request))

    def open_savings(self, request: SavingsAccountRequest) -> SavingsAccount:
        return self._one(SavingsAccount, self._open("/contas/poupanca", request))

    def open_youth(self, request: YouthAccountRequest) -> YouthAccount:
        return self._one(YouthAccount, self._open("/contas/jovem", request))

    def open_global(self, request: GlobalAccountRequest) -> GlobalAccount:
        return self._one(GlobalAccount, self._open("/contas/global", request))

    def list_all(self) -> list[Account]:
        return [parse_account(item) for item in self._client.get("/contas") or []]

    def get(self, account_id: int) -> Account:
        return _parse(self._client.get(f"/contas/{account_id}"))

    def get_by_number(self, number: str) -> Account:
        return _parse(self._client.get(f"/contas/buscar-numero/{number.strip()}"))

    def list_by_tax_id(self, tax_id: str) -> list[Account]:
        """List the accounts a CPF holds.

        Raises
        ------
        InvalidTaxIdError
            If the CPF fails the checksum; no request is sent.
        """
        digits = _clean_tax_id(tax_id)
        return [
            parse_account(item)
            for item in self._client.get(f"/contas/buscar-por-cpf/{digits}") or []
        ]

    def get_balance(self, number: str) -> Decimal:
        """BRL balance of an account; 0 when the backend reports none."""
        data = self._client.get(f"/contas/buscar-numero/{number.strip()}") or {}
        return Decimal(str(data.get("saldo") or 0))

    def update(
        self, account_id: int, request: AccountUpdateRequest
    ) -> AccountUpdateResponse | None:
        request = replace(request, tax_id=_clean_tax_id(request.tax_id))
        return self._one_or_none(
            AccountUpdateResponse, self._client.put(f"/contas/{account_id}", to_payload(request))
        )

    def deactivate(self, number: str, password: str) -> Any:
        """Close an account. Returns the backend's answer as-is."""
        result = self._client.put(f"/contas/desativar/{number.strip()}", {"senha": password})
        logger.info("Account %s deactivated", number)
        return result
