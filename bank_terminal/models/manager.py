"""Manager (gerente) models."""

from dataclasses import dataclass

from bank_terminal.models.base import api_field


@dataclass
class Manager:
    """Bank manager operating the terminal."""

    manager_id: int = api_field("gerenteId")
    name: str = api_field("nome")
    email: str = api_field("email")
    registration: str = api_field("matricula")


@dataclass
class ManagerRequest:
    """Payload to create or update a manager."""

    name: str = api_field("nome")
    password: str = api_field("senha")
    email: str = api_field("email")
    registration: str = api_field("matricula")


@dataclass
class LoginRequest:
    """Manager login credentials."""

    manager_id: int = api_field("gerenteId")
    password: str = api_field("senha")
