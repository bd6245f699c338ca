"""Sample Brazilian identifiers for fixtures and demos."""

from __future__ import annotations

from bank_terminal.generators.base import BaseGenerator
from bank_terminal.identifiers import (
    compute_check_digits,
    format_tax_id,
    only_digits,
)


class IdentifierGenerator(BaseGenerator):
    """Generate CPFs, phone numbers, CEPs and account numbers.

    Every CPF from :meth:`tax_id` passes ``validate_tax_id``; every CPF from
    :meth:`invalid_tax_id` fails it on the second verification digit.
    """

    def tax_id(self, formatted: bool = False) -> str:
        """Generate a valid CPF.

        Parameters
        ----------
        formatted : bool
            Return ``###.###.###-##`` instead of bare digits.

        Returns
        -------
        str
            A CPF whose check digits match its base.
        """
        while True:
            base = "".join(str(self.random.randint(0, 9)) for _ in range(9))
            # All-equal bases give all-equal CPFs, which are never valid
            if base != base[0] * 9:
                break
        cpf = base + compute_check_digits(base)
        return format_tax_id(cpf) if formatted else cpf

    def invalid_tax_id(self) -> str:
        """Generate an 11-digit CPF with a wrong second check digit."""
        cpf = self.tax_id()
        wrong = (int(cpf[10]) + self.random.randint(1, 9)) % 10
        return cpf[:10] + str(wrong)

    def phone(self) -> tuple[str, str]:
        """Generate a ``(ddd, number)`` pair; mobile numbers have 9 digits."""
        ddd = str(self.random.randint(11, 99))
        if self.random.random() < 0.7:
            number = "9" + "".join(str(self.random.randint(0, 9)) for _ in range(8))
        else:
            number = str(self.random.randint(2, 5)) + "".join(
                str(self.random.randint(0, 9)) for _ in range(7)
            )
        return ddd, number

    def postal_code(self) -> str:
        """Generate an 8-digit CEP (bare digits)."""
        return only_digits(self.fake.postcode())[:8].ljust(8, "0")

    def account_number(self) -> str:
        """Generate a 7-digit account number (6 digits + check digit)."""
        return "".join(str(self.random.randint(0, 9)) for _ in range(7))
