"""Pytest configuration and fixtures."""

import json
from datetime import date
from decimal import Decimal
from typing import Any, Iterator

import httpx
import pytest

from bank_terminal.client import ApiClient, BankApi
from bank_terminal.config import ApiConfig
from bank_terminal.models import CustomerRequest, PhoneKind
from bank_terminal.session import ManagerSession

BASE_URL = "http://bank.test/api/v1"


class FakeBackend:
    """Callable for ``httpx.MockTransport`` answering canned responses.

    Routes are keyed by method and path (without the ``/api/v1`` prefix).
    Unknown routes answer 404 with a text body.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        text: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        body: dict[str, Any] = {"json": json_body} if json_body is not None else {"text": text}
        if headers:
            body["headers"] = headers
        self.routes[(method, "/api/v1" + path)] = (status, body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text=f"No route for {request.method} {request.url.path}")
        status, body = route
        return httpx.Response(status, **body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def valid_tax_id() -> str:
    """Known-valid CPF (public test vector)."""
    return "529.982.247-25"


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api(backend: FakeBackend) -> Iterator[BankApi]:
    """BankApi wired to the fake backend."""
    client = BankApi(ApiConfig(base_url=BASE_URL), transport=httpx.MockTransport(backend))
    yield client
    client.close()


@pytest.fixture
def session() -> ManagerSession:
    """Logged-in manager."""
    return ManagerSession(manager_id=7, name="Ana Souza")


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def client(backend: FakeBackend) -> Iterator[ApiClient]:
    """Bare ApiClient wired to the fake backend."""
    api_client = ApiClient(ApiConfig(base_url=BASE_URL), transport=httpx.MockTransport(backend))
    yield api_client
    api_client.close()


@pytest.fixture
def customer_request(valid_tax_id: str) -> CustomerRequest:
    """Registration payload with masked CPF and CEP."""
    return CustomerRequest(
        full_name="Maria da Silva",
        email="maria@example.com",
        tax_id=valid_tax_id,
        birth_date=date(1990, 5, 17),
        id_document="123456789",
        document_issued_on=date(2010, 1, 2),
        marital_status="SOLTEIRA",
        mother_name="Joana da Silva",
        occupation="Engenheira",
        employer="ACME",
        job_title="Analista",
        monthly_income=Decimal("8500.00"),
        employment_years=4,
        has_banking_restrictions=False,
        is_pep=False,
        area_code="11",
        phone_number="912345678",
        phone_kind=PhoneKind.CELULAR,
        postal_code="01310-100",
        street="Av. Paulista",
        number="1000",
        neighborhood="Bela Vista",
        city="São Paulo",
        state="SP",
        address_kind="PROPRIO",
    )
