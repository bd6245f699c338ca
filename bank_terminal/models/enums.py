"""Enumeration types mirroring the backend vocabularies."""

from enum import Enum


class UserRole(str, Enum):
    GERENTE = "GERENTE"
    CLIENTE = "CLIENTE"


class PhoneKind(str, Enum):
    CELULAR = "CELULAR"
    FIXO = "FIXO"
    COMERCIAL = "COMERCIAL"


class AddressKind(str, Enum):
    PROPRIO = "PROPRIO"
    ALUGADO = "ALUGADO"


class TransactionKind(str, Enum):
    DEPOSITO = "DEPOSITO"
    SAQUE = "SAQUE"
    TRANSFERENCIA = "TRANSFERENCIA"
    TRANSFERENCIA_ENVIADA = "TRANSFERENCIA_ENVIADA"
    TRANSFERENCIA_RECEBIDA = "TRANSFERENCIA_RECEBIDA"


class AccountKind(str, Enum):
    CORRENTE = "CORRENTE"
    POUPANCA = "POUPANCA"
    JOVEM = "JOVEM"
    GLOBAL = "GLOBAL"


class AccountStatus(str, Enum):
    ATIVA = "ATIVA"
    EXCLUIDA = "EXCLUIDA"


class CustomerSegment(str, Enum):
    CLASS = "CLASS"
    ADVANCED = "ADVANCED"
    PREMIUM = "PREMIUM"


class DebitStatus(str, Enum):
    ATIVO = "ATIVO"
    SUSPENSO = "SUSPENSO"
    CANCELADO = "CANCELADO"
    ERRO_PROCESSAMENTO = "ERRO_PROCESSAMENTO"


class ServiceKind(str, Enum):
    ENERGIA = "ENERGIA"
    AGUA_SANEAMENTO = "AGUA_SANEAMENTO"
    TELEFONIA_FIXA_MOVEL = "TELEFONIA_FIXA_MOVEL"
    INTERNET_TV = "INTERNET_TV"
    IPVA = "IPVA"
    OUTROS = "OUTROS"


class DebitFrequency(str, Enum):
    SEMANAL = "SEMANAL"
    MENSAL = "MENSAL"
    ANUAL = "ANUAL"
