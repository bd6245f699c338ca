"""Transaction endpoints (``/transacoes``).

Every operation records the executing manager, taken from the session.
"""

import logging
from decimal import Decimal
from typing import Any

from bank_terminal.client.base import Resource
from bank_terminal.models import (
    DepositRequest,
    InternationalDepositRequest,
    InternationalWithdrawalRequest,
    Transaction,
    TransferRequest,
    WithdrawalRequest,
)
from bank_terminal.serialization import to_payload
from bank_terminal.session import ManagerSession

logger = logging.getLogger(__name__)


def _require_positive(amount: Decimal) -> None:
    if amount <= 0:
        raise ValueError(f"Amount must be positive, got {amount}")


class TransactionResource(Resource):
    """Deposits, withdrawals, transfers and statements."""

    def _execute(self, kind: str, request: Any, session: ManagerSession) -> Transaction:
        data = self._client.post(
            f"/transacoes/{kind}",
            to_payload(request),
            params={"gerenteExecutorId": session.manager_id},
        )
        transaction = self._one(Transaction, data)
        logger.info(
            "Transaction %s (%s) executed by manager %d",
            transaction.nsu,
            kind,
            session.manager_id,
        )
        return transaction

    def transfer(self, request: TransferRequest, session: ManagerSession) -> Transaction:
        _require_positive(request.amount)
        return self._execute("transferencia", request, session)

    def deposit(self, request: DepositRequest, session: ManagerSession) -> Transaction:
        _require_positive(request.amount)
        return self._execute("deposito", request, session)

    def withdraw(self, request: WithdrawalRequest, session: ManagerSession) -> Transaction:
        _require_positive(request.amount)
        return self._execute("saque", request, session)

    def withdraw_international(
        self, request: InternationalWithdrawalRequest, session: ManagerSession
    ) -> Transaction:
        _require_positive(request.usd_amount)
        return self._execute("saque-internacional", request, session)

    def deposit_international(
        self, request: InternationalDepositRequest, session: ManagerSession
    ) -> Transaction:
        _require_positive(request.usd_amount)
        return self._execute("deposito-internacional", request, session)

    def statement(self, account_id: int) -> list[Transaction]:
        return self._many(Transaction, self._client.get(f"/transacoes/extrato/{account_id}"))
