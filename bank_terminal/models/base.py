"""Base models shared across backend resources."""

from dataclasses import MISSING, dataclass, field
from typing import Any

from bank_terminal.models.enums import PhoneKind


def api_field(name: str, default: Any = MISSING) -> Any:
    """Declare a dataclass field stored under ``name`` in backend payloads."""
    if default is MISSING:
        return field(metadata={"json": name})
    return field(default=default, metadata={"json": name})


@dataclass
class Address:
    """Customer address as returned by the backend.

    ``kind`` is free text on the backend side (``PROPRIO``/``ALUGADO`` in
    practice), so it is kept as a plain string.
    """

    address_id: int = api_field("idEndereco")
    postal_code: str = api_field("cep")
    street: str = api_field("logradouro")
    number: str = api_field("numero")
    neighborhood: str = api_field("bairro")
    city: str = api_field("cidade")
    state: str = api_field("estado")
    kind: str = api_field("tipoEndereco")
    complement: str = api_field("complemento", "")
    customer_id: int | None = api_field("clienteId", None)


@dataclass
class AddressRequest:
    """Payload to create an address for an existing customer."""

    postal_code: str = api_field("cep")
    street: str = api_field("logradouro")
    number: str = api_field("numero")
    neighborhood: str = api_field("bairro")
    city: str = api_field("cidade")
    state: str = api_field("estado")
    kind: str = api_field("tipoEndereco")
    customer_id: int = api_field("clienteId")
    complement: str | None = api_field("complemento", None)
    address_id: int | None = api_field("idEndereco", None)


@dataclass
class AddressUpdateRequest:
    """Partial address update; None fields are left untouched."""

    postal_code: str | None = api_field("cep", None)
    street: str | None = api_field("logradouro", None)
    number: str | None = api_field("numero", None)
    complement: str | None = api_field("complemento", None)
    neighborhood: str | None = api_field("bairro", None)
    city: str | None = api_field("cidade", None)
    state: str | None = api_field("estado", None)
    kind: str | None = api_field("tipoEndereco", None)


@dataclass
class Phone:
    """Customer phone number."""

    country_code: str = api_field("ddi")
    area_code: str = api_field("ddd")
    number: str = api_field("numero")
    kind: PhoneKind = api_field("tipoTelefone")


@dataclass
class PostalCodeLookup:
    """CEP lookup result (ViaCEP shape, proxied by the backend)."""

    postal_code: str = api_field("cep")
    street: str = api_field("logradouro", "")
    complement: str = api_field("complemento", "")
    neighborhood: str = api_field("bairro", "")
    city: str = api_field("localidade", "")
    state: str = api_field("uf", "")
    error: bool | str | None = api_field("erro", None)
