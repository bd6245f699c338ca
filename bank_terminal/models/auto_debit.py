"""Automatic debit (débito automático) models."""

from dataclasses import dataclass

from bank_terminal.models.base import api_field
from bank_terminal.models.enums import DebitFrequency, DebitStatus, ServiceKind

MIN_SCHEDULED_DAY = 1
MAX_SCHEDULED_DAY = 28


@dataclass
class AutoDebitRequest:
    account_id: int = api_field("contaId")
    scheduled_day: int = api_field("diaAgendado")
    service: ServiceKind = api_field("tipoServico")
    frequency: DebitFrequency = api_field("frequencia")
    agreement_id: str = api_field("identificadorConvenio")
    description: str | None = api_field("descricao", None)


@dataclass
class AutoDebit:
    """Registered automatic debit."""

    debit_id: int = api_field("id")
    account_id: int = api_field("contaId")
    scheduled_day: int = api_field("diaAgendado")
    frequency: DebitFrequency = api_field("frequencia")
    service: ServiceKind = api_field("tipoServico")
    status: DebitStatus = api_field("status")
    agreement_id: str = api_field("identificadorConvenio")
    description: str = api_field("descricao", "")
