"""Sample data generators."""

from bank_terminal.generators.identifiers import IdentifierGenerator

__all__ = ["IdentifierGenerator"]
