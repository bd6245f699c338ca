"""Account models.

The backend serves four account kinds from the same endpoints. Each kind
is its own dataclass carrying only its own fields; ``Account`` is the union
of them and ``KIND`` tells them apart.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar, Union

from bank_terminal.models.base import api_field
from bank_terminal.models.enums import AccountKind, AccountStatus, CustomerSegment


@dataclass
class CheckingAccount:
    """Conta corrente, with an overdraft limit (cheque especial)."""

    KIND: ClassVar[AccountKind] = AccountKind.CORRENTE

    account_id: int = api_field("id")
    number: str = api_field("numeroConta")
    branch: str = api_field("agencia")
    balance: Decimal = api_field("saldo", Decimal("0"))
    overdraft_limit: Decimal = api_field("limiteChequeEspecial", Decimal("0"))
    holder_tax_ids: list[str] = field(default_factory=list, metadata={"json": "titularCpfs"})
    status: AccountStatus = api_field("statusConta", AccountStatus.ATIVA)
    kind_label: str = api_field("tipoConta", "")
    segment: CustomerSegment | None = api_field("segmentoCliente", None)


@dataclass
class SavingsAccount:
    """Conta poupança, yielding on its anniversary day."""

    KIND: ClassVar[AccountKind] = AccountKind.POUPANCA

    account_id: int = api_field("id")
    number: str = api_field("numeroConta")
    branch: str = api_field("agencia")
    balance: Decimal = api_field("saldo", Decimal("0"))
    anniversary_day: int | None = api_field("diaAniversario", None)
    yield_rate: Decimal | None = api_field("rendimento", None)
    holder_tax_ids: list[str] = field(default_factory=list, metadata={"json": "titularCpfs"})
    status: AccountStatus = api_field("statusConta", AccountStatus.ATIVA)
    kind_label: str = api_field("tipoConta", "")
    segment: CustomerSegment | None = api_field("segmentoCliente", None)


@dataclass
class YouthAccount:
    """Conta jovem, tied to a guardian's account."""

    KIND: ClassVar[AccountKind] = AccountKind.JOVEM

    account_id: int = api_field("id")
    number: str = api_field("numeroConta")
    branch: str = api_field("agencia")
    guardian_account_number: str = api_field("numeroContaResponsavel")
    balance: Decimal = api_field("saldo", Decimal("0"))
    holder_tax_ids: list[str] = field(default_factory=list, metadata={"json": "titularCpfs"})
    status: AccountStatus = api_field("statusConta", AccountStatus.ATIVA)
    kind_label: str = api_field("tipoConta", "")
    segment: CustomerSegment | None = api_field("segmentoCliente", None)


@dataclass
class GlobalAccount:
    """Conta global, holding a USD balance next to the BRL one."""

    KIND: ClassVar[AccountKind] = AccountKind.GLOBAL

    account_id: int = api_field("id")
    number: str = api_field("numeroConta")
    branch: str = api_field("agencia")
    balance: Decimal = api_field("saldo", Decimal("0"))
    usd_balance: Decimal = api_field("saldoDolar", Decimal("0"))
    swift_code: str = api_field("codigoSwift", "")
    holder_tax_ids: list[str] = field(default_factory=list, metadata={"json": "titularCpfs"})
    status: AccountStatus = api_field("statusConta", AccountStatus.ATIVA)
    kind_label: str = api_field("tipoConta", "")
    segment: CustomerSegment | None = api_field("segmentoCliente", None)


Account = Union[CheckingAccount, SavingsAccount, YouthAccount, GlobalAccount]

ACCOUNT_CLASSES: dict[AccountKind, type] = {
    AccountKind.CORRENTE: CheckingAccount,
    AccountKind.POUPANCA: SavingsAccount,
    AccountKind.JOVEM: YouthAccount,
    AccountKind.GLOBAL: GlobalAccount,
}


@dataclass
class CheckingAccountRequest:
    branch: str = api_field("agencia")
    holder_tax_ids: list[str] = api_field("titularCpfs")
    password: str = api_field("senha")
    overdraft_limit: Decimal | None = api_field("limiteChequeEspecial", None)


@dataclass
class SavingsAccountRequest:
    branch: str = api_field("agencia")
    holder_tax_ids: list[str] = api_field("titularCpfs")
    password: str = api_field("senha")


@dataclass
class YouthAccountRequest:
    branch: str = api_field("agencia")
    holder_tax_ids: list[str] = api_field("titularCpfs")
    password: str = api_field("senha")
    guardian_account_number: str = api_field("numeroContaResponsavel")


@dataclass
class GlobalAccountRequest:
    branch: str = api_field("agencia")
    holder_tax_ids: list[str] = api_field("titularCpfs")
    password: str = api_field("senha")


@dataclass
class AccountUpdateRequest:
    """Account update; the holder CPF authorizes the change."""

    tax_id: str = api_field("cpf")
    number: str | None = api_field("numeroConta", None)
    branch: str | None = api_field("agencia", None)


@dataclass
class AccountUpdateResponse:
    branch: str = api_field("agencia")
