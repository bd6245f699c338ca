"""Customer endpoints (``/clientes``)."""

import logging
from dataclasses import replace

from bank_terminal.client.base import Resource
from bank_terminal.exceptions import InvalidTaxIdError
from bank_terminal.identifiers import only_digits, validate_tax_id
from bank_terminal.models import Customer, CustomerRequest, CustomerUpdateRequest
from bank_terminal.serialization import to_payload
from bank_terminal.session import ManagerSession

logger = logging.getLogger(__name__)


class CustomerResource(Resource):
    """Customer registration, lookup and maintenance."""

    def create(self, request: CustomerRequest, session: ManagerSession | None = None) -> Customer:
        """Register a customer.

        The CPF is checked before anything is sent; CPF and CEP masks are
        stripped. When a session is given, the logged-in manager becomes the
        customer's account manager.

        Parameters
        ----------
        request : CustomerRequest
            Registration data, masks allowed.
        session : ManagerSession | None
            Logged-in manager.

        Returns
        -------
        Customer
            The created customer.

        Raises
        ------
        InvalidTaxIdError
            If the CPF fails the checksum.
        """
        if not validate_tax_id(request.tax_id):
            raise InvalidTaxIdError(request.tax_id)

        request = replace(
            request,
            tax_id=only_digits(request.tax_id),
            postal_code=only_digits(request.postal_code),
            manager_id=session.manager_id if session else request.manager_id,
        )
        customer = self._one(Customer, self._client.post("/clientes", to_payload(request)))
        logger.info("Customer %s registered", customer.customer_id)
        return customer

    def list_all(self) -> list[Customer]:
        return self._many(Customer, self._client.get("/clientes"))

    def get(self, customer_id: int) -> Customer:
        return self._one(Customer, self._client.get(f"/clientes/{customer_id}"))

    def find_by_tax_id(self, tax_id: str) -> Customer | None:
        """Find a customer by CPF, masked or not.

        The backend has no CPF lookup, so this scans the full customer list.
        """
        if not validate_tax_id(tax_id):
            raise InvalidTaxIdError(tax_id)

        digits = only_digits(tax_id)
        for customer in self.list_all():
            if only_digits(customer.tax_id or "") == digits:
                return customer
        return None

    def update(self, customer_id: int, request: CustomerUpdateRequest) -> Customer | None:
        if request.tax_id is not None:
            if not validate_tax_id(request.tax_id):
                raise InvalidTaxIdError(request.tax_id)
            request = replace(request, tax_id=only_digits(request.tax_id))
        data = self._client.put(f"/clientes/{customer_id}", to_payload(request))
        return self._one_or_none(Customer, data)

    def delete(self, customer_id: int) -> None:
        self._client.delete(f"/clientes/{customer_id}")
        logger.info("Customer %s deleted", customer_id)
