"""Tests for the manager session."""

import dataclasses

import pytest

from bank_terminal.exceptions import AuthenticationError
from bank_terminal.models import Manager
from bank_terminal.session import ManagerSession


class TestManagerSession:
    """Tests for ManagerSession."""

    def test_from_manager(self) -> None:
        manager = Manager(manager_id=7, name="Ana Souza", email="ana@bank.test", registration="G-7")
        assert ManagerSession.from_manager(manager) == ManagerSession(7, "Ana Souza")

    def test_from_missing_manager(self) -> None:
        with pytest.raises(AuthenticationError):
            ManagerSession.from_manager(None)

    def test_from_manager_without_id(self) -> None:
        manager = Manager(manager_id=None, name="", email="", registration="")
        with pytest.raises(AuthenticationError):
            ManagerSession.from_manager(manager)

    def test_frozen(self, session: ManagerSession) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            session.manager_id = 8
