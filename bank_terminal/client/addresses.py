"""Address endpoints (``/enderecos``)."""

from dataclasses import replace

from bank_terminal.client.base import Resource
from bank_terminal.exceptions import InvalidIdentifierError
from bank_terminal.identifiers import only_digits
from bank_terminal.identifiers.masks import POSTAL_CODE_LENGTH
from bank_terminal.models import (
    Address,
    AddressKind,
    AddressRequest,
    AddressUpdateRequest,
    PostalCodeLookup,
)
from bank_terminal.serialization import to_payload


class AddressResource(Resource):
    """Customer addresses and CEP lookup."""

    def create(self, request: AddressRequest) -> Address:
        request = replace(request, postal_code=only_digits(request.postal_code))
        return self._one(Address, self._client.post("/enderecos", to_payload(request)))

    def list_all(self) -> list[Address]:
        return self._many(Address, self._client.get("/enderecos"))

    def get(self, address_id: int) -> Address:
        return self._one(Address, self._client.get(f"/enderecos/{address_id}"))

    def lookup_postal_code(self, postal_code: str) -> PostalCodeLookup | None:
        """Look up a CEP.

        Returns None when the CEP does not exist.

        Raises
        ------
        InvalidIdentifierError
            If the CEP does not have exactly 8 digits.
        """
        digits = only_digits(postal_code)
        if len(digits) != POSTAL_CODE_LENGTH:
            raise InvalidIdentifierError("CEP", postal_code)

        lookup = self._one(PostalCodeLookup, self._client.get(f"/enderecos/cep/{digits}"))
        if lookup.error:
            return None
        return lookup

    def list_by_customer(self, customer_id: int) -> list[Address]:
        return self._many(Address, self._client.get(f"/enderecos/cliente/{customer_id}"))

    def get_by_customer_and_kind(self, customer_id: int, kind: AddressKind | str) -> Address:
        kind_value = kind.value if isinstance(kind, AddressKind) else kind
        return self._one(
            Address, self._client.get(f"/enderecos/cliente/{customer_id}/tipo/{kind_value}")
        )

    def update(self, address_id: int, request: AddressUpdateRequest) -> Address | None:
        if request.postal_code is not None:
            request = replace(request, postal_code=only_digits(request.postal_code))
        data = self._client.put(f"/enderecos/{address_id}", to_payload(request))
        return self._one_or_none(Address, data)

    def delete(self, address_id: int) -> None:
        self._client.delete(f"/enderecos/{address_id}")
