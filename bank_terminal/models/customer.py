"""Customer models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from bank_terminal.models.base import Address, Phone, api_field
from bank_terminal.models.enums import PhoneKind, UserRole


@dataclass
class CustomerRequest:
    """Customer registration payload.

    Phone and main address are embedded, as the backend creates them in the
    same call. ``manager_id`` is normally filled from the manager session.
    """

    full_name: str = api_field("nomeCompleto")
    email: str = api_field("email")
    tax_id: str = api_field("cpf")
    birth_date: date = api_field("dataNascimento")
    id_document: str = api_field("rg")
    document_issued_on: date = api_field("dataEmissaoDocumento")
    marital_status: str = api_field("estadoCivil")
    mother_name: str = api_field("nomeMae")
    occupation: str = api_field("profissao")
    employer: str = api_field("empresaAtual")
    job_title: str = api_field("cargo")
    monthly_income: Decimal = api_field("rendaMensal")
    employment_years: int = api_field("tempoEmprego")
    has_banking_restrictions: bool = api_field("possuiRestricoesBancarias")
    is_pep: bool = api_field("ePpe")

    # Embedded phone
    area_code: str = api_field("ddd")
    phone_number: str = api_field("numeroTelefone")
    phone_kind: PhoneKind = api_field("tipoTelefone")

    # Embedded address
    postal_code: str = api_field("cep")
    street: str = api_field("logradouro")
    number: str = api_field("numero")
    neighborhood: str = api_field("bairro")
    city: str = api_field("cidade")
    state: str = api_field("uf")
    address_kind: str = api_field("tipoEndereco")

    country_code: str = api_field("ddi", "+55")
    role: UserRole = api_field("role", UserRole.CLIENTE)
    manager_id: int | None = api_field("gerenteId", None)
    father_name: str | None = api_field("nomePai", None)
    social_name: str | None = api_field("nomeSocial", None)
    estimated_assets: Decimal | None = api_field("patrimonioEstimado", None)
    complement: str | None = api_field("complemento", None)


@dataclass
class CustomerUpdateRequest:
    """Partial customer update; None fields are left untouched."""

    full_name: str | None = api_field("nomeCompleto", None)
    email: str | None = api_field("email", None)
    tax_id: str | None = api_field("cpf", None)
    birth_date: date | None = api_field("dataNascimento", None)
    id_document: str | None = api_field("rg", None)
    document_issued_on: date | None = api_field("dataEmissaoDocumento", None)
    father_name: str | None = api_field("nomePai", None)
    mother_name: str | None = api_field("nomeMae", None)
    marital_status: str | None = api_field("estadoCivil", None)
    social_name: str | None = api_field("nomeSocial", None)
    occupation: str | None = api_field("profissao", None)
    employer: str | None = api_field("empresaAtual", None)
    job_title: str | None = api_field("cargo", None)
    monthly_income: Decimal | None = api_field("rendaMensal", None)
    employment_years: int | None = api_field("tempoEmprego", None)
    estimated_assets: Decimal | None = api_field("patrimonioEstimado", None)
    has_banking_restrictions: bool | None = api_field("possuiRestricoesBancarias", None)
    is_pep: bool | None = api_field("ePpe", None)
    role: UserRole | None = api_field("role", None)


@dataclass
class Customer:
    """Bank customer as returned by the backend."""

    customer_id: int = api_field("id")
    full_name: str = api_field("nomeCompleto")
    email: str = api_field("email")
    tax_id: str = api_field("cpf")
    birth_date: date | None = api_field("dataNascimento", None)
    id_document: str = api_field("rg", "")
    document_issued_on: date | None = api_field("dataEmissaoDocumento", None)
    father_name: str | None = api_field("nomePai", None)
    mother_name: str | None = api_field("nomeMae", None)
    marital_status: str | None = api_field("estadoCivil", None)
    social_name: str | None = api_field("nomeSocial", None)
    occupation: str | None = api_field("profissao", None)
    employer: str | None = api_field("empresaAtual", None)
    job_title: str | None = api_field("cargo", None)
    monthly_income: Decimal | None = api_field("rendaMensal", None)
    employment_years: int | None = api_field("tempoEmprego", None)
    estimated_assets: Decimal | None = api_field("patrimonioEstimado", None)
    has_banking_restrictions: bool = api_field("possuiRestricoesBancarias", False)
    is_pep: bool = api_field("ePpe", False)
    role: UserRole = api_field("role", UserRole.CLIENTE)
    addresses: list[Address] = field(default_factory=list, metadata={"json": "enderecos"})
    phone: Phone | None = api_field("telefoneResponse", None)
