"""Transaction models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_terminal.models.base import api_field
from bank_terminal.models.enums import TransactionKind


@dataclass
class Transaction:
    """Executed transaction, as listed in an account statement.

    ``nsu`` is the backend-assigned unique sequence number; it is opaque
    to the terminal.
    """

    transaction_id: int = api_field("id")
    nsu: str = api_field("nsUnico")
    kind: TransactionKind = api_field("tipo")
    amount: Decimal = api_field("valor")
    timestamp: datetime = api_field("dataHora")
    manager_id: int | None = api_field("gerenteExecutorId", None)
    manager_name: str | None = api_field("nomeGerenteExecutor", None)
    source_account_id: int | None = api_field("contaOrigemId", None)
    source_account_number: str | None = api_field("numeroContaOrigem", None)
    target_account_id: int | None = api_field("contaDestinoId", None)
    target_account_number: str | None = api_field("numeroContaDestino", None)
    reason: str | None = api_field("motivoMovimentacao", None)


@dataclass
class TransferRequest:
    source_account_id: int = api_field("contaOrigemId")
    target_account_id: int = api_field("contaDestinoId")
    amount: Decimal = api_field("valor")
    password: str = api_field("senha")
    reason: str | None = api_field("motivoMovimentacao", None)


@dataclass
class DepositRequest:
    account_id: int = api_field("contaId")
    amount: Decimal = api_field("valor")
    password: str = api_field("senha")
    reason: str | None = api_field("motivoMovimentacao", None)


@dataclass
class WithdrawalRequest:
    account_id: int = api_field("contaId")
    amount: Decimal = api_field("valor")
    password: str = api_field("senha")
    reason: str | None = api_field("motivoMovimentacao", None)


@dataclass
class InternationalWithdrawalRequest:
    """Withdrawal from a global account, in US dollars."""

    account_id: int = api_field("contaId")
    usd_amount: Decimal = api_field("valorDolares")
    reason: str | None = api_field("motivoMovimentacao", None)


@dataclass
class InternationalDepositRequest:
    """Deposit into a global account, in US dollars."""

    account_id: int = api_field("contaId")
    usd_amount: Decimal = api_field("valorDolares")
    reason: str | None = api_field("motivoMovimentacao", None)
