"""Tests for the JSON HTTP client."""

import httpx
import pytest

from bank_terminal.client import ApiClient
from bank_terminal.config import ApiConfig
from bank_terminal.exceptions import RequestFailedError


class TestApiClient:
    """Tests for ApiClient."""

    def test_decodes_json(self, client: ApiClient, backend) -> None:
        backend.add("GET", "/gerentes", json_body=[{"gerenteId": 1}])
        assert client.get("/gerentes") == [{"gerenteId": 1}]

    def test_sends_json_headers(self, client: ApiClient, backend, base_url: str) -> None:
        backend.add("POST", "/gerentes", json_body={})
        client.post("/gerentes", {"nome": "Ana"})
        request = backend.last_request
        assert request.headers["content-type"] == "application/json"
        assert request.headers["accept"] == "application/json"
        assert str(request.url) == f"{base_url}/gerentes"
        assert backend.last_json == {"nome": "Ana"}

    def test_query_params(self, client: ApiClient, backend) -> None:
        backend.add("POST", "/transacoes/deposito", json_body={})
        client.post("/transacoes/deposito", {}, params={"gerenteExecutorId": 7})
        assert backend.last_request.url.params["gerenteExecutorId"] == "7"

    def test_no_content_returns_none(self, client: ApiClient, backend) -> None:
        backend.add("DELETE", "/clientes/1", status=204)
        assert client.delete("/clientes/1") is None

    def test_empty_body_returns_none(self, client: ApiClient, backend) -> None:
        backend.add("PUT", "/contas/desativar/1234567", status=200)
        assert client.put("/contas/desativar/1234567", {"senha": "x"}) is None

    def test_error_carries_body(self, client: ApiClient, backend) -> None:
        backend.add("POST", "/transacoes/saque", status=400, text="Saldo insuficiente")
        with pytest.raises(RequestFailedError) as exc_info:
            client.post("/transacoes/saque", {})
        assert exc_info.value.message == "Saldo insuficiente"
        assert exc_info.value.status_code == 400
        assert str(exc_info.value) == "Saldo insuficiente"

    def test_error_without_body(self, client: ApiClient, backend) -> None:
        backend.add("GET", "/contas/1", status=500)
        with pytest.raises(RequestFailedError, match="HTTP error! status: 500"):
            client.get("/contas/1")

    def test_unknown_route(self, client: ApiClient) -> None:
        with pytest.raises(RequestFailedError) as exc_info:
            client.get("/nada")
        assert exc_info.value.status_code == 404

    def test_invalid_json(self, client: ApiClient, backend) -> None:
        backend.add("GET", "/clientes", text="<html>oops</html>")
        with pytest.raises(RequestFailedError, match="Invalid JSON"):
            client.get("/clientes")

    def test_transport_error(self, base_url: str) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with ApiClient(ApiConfig(base_url=base_url), transport=httpx.MockTransport(refuse)) as c:
            with pytest.raises(RequestFailedError) as exc_info:
                c.get("/gerentes")
        assert exc_info.value.status_code is None
        assert "Connection refused" in exc_info.value.message

    def test_follows_redirect(self, client: ApiClient, backend, base_url: str) -> None:
        backend.add("GET", "/contas/1", status=302, headers={"Location": f"{base_url}/contas/2"})
        backend.add("GET", "/contas/2", json_body={"id": 2})

        assert client.get("/contas/1") == {"id": 2}
        assert [r.url.path for r in backend.requests] == ["/api/v1/contas/1", "/api/v1/contas/2"]

    @pytest.mark.parametrize("status", [301, 302, 304])
    def test_unfollowed_redirect_is_error(self, client: ApiClient, backend, status: int) -> None:
        backend.add("GET", "/contas/1", status=status)
        with pytest.raises(RequestFailedError, match=f"HTTP error! status: {status}") as exc_info:
            client.get("/contas/1")
        assert exc_info.value.status_code == status
