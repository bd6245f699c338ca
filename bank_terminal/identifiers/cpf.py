"""CPF (Brazilian individual taxpayer ID) validation and formatting.

A CPF has 11 digits: a 9-digit base followed by two verification digits.
Each verification digit is a weighted mod-11 checksum over the digits
before it, with descending weights ending at 2.
"""

import re

CPF_LENGTH = 11
CPF_BASE_LENGTH = 9

_NON_DIGITS = re.compile(r"[^0-9]")


def only_digits(value: str) -> str:
    """Strip every non-digit character from ``value``."""
    return _NON_DIGITS.sub("", value)


def _check_digit(digits: str) -> int:
    """Weighted mod-11 checksum over ``digits`` (weights len+1 down to 2)."""
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder >= 10 else remainder


def compute_check_digits(base: str) -> str:
    """Compute the two verification digits for a 9-digit CPF base.

    Parameters
    ----------
    base : str
        Exactly nine decimal digits.

    Returns
    -------
    str
        The two verification digits.

    Raises
    ------
    ValueError
        If ``base`` is not exactly nine digits.
    """
    if len(base) != CPF_BASE_LENGTH or not base.isdigit():
        raise ValueError(f"CPF base must be {CPF_BASE_LENGTH} digits, got {base!r}")

    first = _check_digit(base)
    second = _check_digit(base + str(first))
    return f"{first}{second}"


def validate_tax_id(value: str) -> bool:
    """Return True if ``value`` is a structurally valid CPF.

    Punctuation is ignored. Wrong length, repeated digits (``111.111.111-11``)
    and checksum mismatches all yield False; nothing is raised.

    Examples
    --------
    >>> validate_tax_id("529.982.247-25")
    True
    >>> validate_tax_id("111.111.111-11")
    False
    """
    digits = only_digits(value)
    if len(digits) != CPF_LENGTH:
        return False
    # Repeated digits pass the checksum equations but are never issued
    if digits == digits[0] * CPF_LENGTH:
        return False
    return digits[CPF_BASE_LENGTH:] == compute_check_digits(digits[:CPF_BASE_LENGTH])


def format_tax_id(value: str) -> str:
    """Mask a CPF as ``###.###.###-##``.

    Masking is progressive: partial input is masked as far as the available
    digits allow, and digits beyond the eleventh are dropped.

    Examples
    --------
    >>> format_tax_id("52998224725")
    '529.982.247-25'
    >>> format_tax_id("5299")
    '529.9'
    """
    digits = only_digits(value)[:CPF_LENGTH]

    formatted = digits[:3]
    if len(digits) > 3:
        formatted += "." + digits[3:6]
    if len(digits) > 6:
        formatted += "." + digits[6:9]
    if len(digits) > 9:
        formatted += "-" + digits[9:]
    return formatted


def mask_tax_id(value: str) -> str:
    """Hide a CPF for logs and receipts, keeping the last three digits.

    ``"52998224725"`` becomes ``"***.***.**7-25"``; anything that is not
    11 digits is fully hidden.
    """
    digits = only_digits(value)
    if len(digits) != CPF_LENGTH:
        return "***.***.***-**"
    return f"***.***.**{digits[8]}-{digits[9:]}"
