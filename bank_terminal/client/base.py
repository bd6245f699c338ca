"""Shared plumbing for backend resources."""

from typing import Any, TypeVar

from bank_terminal.client.http import ApiClient
from bank_terminal.exceptions import RequestFailedError
from bank_terminal.serialization import from_payload

T = TypeVar("T")


class Resource:
    """One backend area (managers, customers, ...) over a shared client."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @staticmethod
    def _one(cls: type[T], data: Any) -> T:
        """Build ``cls`` from a response that must carry a record."""
        if data is None:
            raise RequestFailedError(f"Empty response where a {cls.__name__} was expected")
        return from_payload(cls, data)

    @staticmethod
    def _one_or_none(cls: type[T], data: Any) -> T | None:
        """Build ``cls`` from a response the backend may leave empty (204)."""
        if data is None:
            return None
        return from_payload(cls, data)

    @staticmethod
    def _many(cls: type[T], data: Any) -> list[T]:
        return [from_payload(cls, item) for item in data or []]
