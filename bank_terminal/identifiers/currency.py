"""Currency display in the pt-BR convention (``R$ 1.234,56``)."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CURRENCY_SYMBOLS: dict[str, str] = {
    "BRL": "R$",
    "USD": "US$",
}

_CENTS = Decimal("0.01")


def format_currency(amount: Decimal | int | float | str, currency: str = "BRL") -> str:
    """Format an amount with pt-BR grouping and two decimals.

    Parameters
    ----------
    amount : Decimal | int | float | str
        Amount to format. Floats go through ``str`` first so ``0.1`` stays 0.10.
    currency : str
        ISO code, ``"BRL"`` or ``"USD"``.

    Returns
    -------
    str
        Formatted amount, e.g. ``"R$ 1.234,56"`` or ``"-US$ 10,00"``.

    Raises
    ------
    ValueError
        If the currency is unknown or the amount is not a number.
    """
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    if symbol is None:
        raise ValueError(f"Unsupported currency: {currency}")

    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Not a monetary amount: {amount!r}") from None

    value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    # en-US grouping first, then swap separators
    grouped = f"{abs(value):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol} {grouped}"


def parse_currency(text: str) -> Decimal:
    """Parse a pt-BR monetary string into a Decimal.

    Accepts ``"R$ 1.234,56"``, ``"1234,56"``, ``"-US$ 10"`` and plain
    ``"1234.56"`` (a single dot followed by 1-2 digits is read as decimal).

    Raises
    ------
    ValueError
        If no amount can be read from ``text``.
    """
    cleaned = text.strip()
    negative = cleaned.startswith("-")
    cleaned = re.sub(r"[^0-9,.]", "", cleaned)

    if not cleaned:
        raise ValueError(f"No amount found in: {text!r}")

    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    elif not re.fullmatch(r"[0-9]+\.[0-9]{1,2}", cleaned):
        cleaned = cleaned.replace(".", "")

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount: {text!r} (cleaned: {cleaned!r})") from None

    return -value if negative else value
