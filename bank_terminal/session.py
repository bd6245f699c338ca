"""Manager session context."""

from dataclasses import dataclass

from bank_terminal.exceptions import AuthenticationError
from bank_terminal.models.manager import Manager


@dataclass(frozen=True)
class ManagerSession:
    """The manager logged into the terminal.

    Produced by a successful login and passed explicitly to every operation
    that acts on the manager's behalf (transactions record the executing
    manager, customer registration records the account manager).
    """

    manager_id: int
    name: str

    @classmethod
    def from_manager(cls, manager: Manager | None) -> "ManagerSession":
        """Build a session from a login response."""
        if manager is None or not manager.manager_id:
            raise AuthenticationError("Manager ID or password is incorrect")
        return cls(manager_id=manager.manager_id, name=manager.name)
