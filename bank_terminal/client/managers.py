"""Manager endpoints (``/gerentes``)."""

import logging

from bank_terminal.client.base import Resource
from bank_terminal.models import LoginRequest, Manager, ManagerRequest
from bank_terminal.serialization import to_payload
from bank_terminal.session import ManagerSession

logger = logging.getLogger(__name__)


class ManagerResource(Resource):
    """Manager login and CRUD."""

    def login(self, manager_id: int, password: str) -> ManagerSession:
        """Authenticate a manager and open a session.

        Raises
        ------
        AuthenticationError
            If the backend answers without identifying a manager.
        RequestFailedError
            If the backend rejects the credentials.
        """
        data = self._client.post(
            "/gerentes/login",
            to_payload(LoginRequest(manager_id=manager_id, password=password)),
        )
        manager = self._one(Manager, data) if data else None
        session = ManagerSession.from_manager(manager)
        logger.info("Manager %d (%s) logged in", session.manager_id, session.name)
        return session

    def create(self, request: ManagerRequest) -> Manager:
        return self._one(Manager, self._client.post("/gerentes", to_payload(request)))

    def list_all(self) -> list[Manager]:
        return self._many(Manager, self._client.get("/gerentes"))

    def get(self, manager_id: int) -> Manager:
        return self._one(Manager, self._client.get(f"/gerentes/{manager_id}"))

    def update(self, manager_id: int, request: ManagerRequest) -> Manager | None:
        data = self._client.put(f"/gerentes/{manager_id}", to_payload(request))
        return self._one_or_none(Manager, data)

    def delete(self, manager_id: int) -> None:
        self._client.delete(f"/gerentes/{manager_id}")
