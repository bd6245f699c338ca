"""Display masks for phone numbers, CEPs and bank account numbers.

Every formatter strips non-digits first and re-applies its mask to
whatever is left, so the functions can run on each keystroke and are
idempotent. None of them validate.
"""

from bank_terminal.identifiers.cpf import only_digits

AREA_CODE_LENGTH = 2
MOBILE_NUMBER_LENGTH = 9
POSTAL_CODE_LENGTH = 8
ACCOUNT_NUMBER_MAX_LENGTH = 8
ACCOUNT_BODY_LENGTH = 6


def format_phone(area_code: str, number: str) -> str:
    """Mask a phone number as ``(##) #####-####`` or ``(##) ####-####``.

    A 9-digit number (mobile) splits 5+4; anything shorter splits after
    the fourth digit.

    Parameters
    ----------
    area_code : str
        DDD, two digits.
    number : str
        Subscriber number, 8 or 9 digits.

    Returns
    -------
    str
        Masked phone number.
    """
    ddd = only_digits(area_code)[:AREA_CODE_LENGTH]
    digits = only_digits(number)[:MOBILE_NUMBER_LENGTH]

    if not ddd and not digits:
        return ""

    split = 5 if len(digits) == MOBILE_NUMBER_LENGTH else 4
    if len(digits) > split:
        body = f"{digits[:split]}-{digits[split:]}"
    else:
        body = digits

    return f"({ddd}) {body}".rstrip()


def format_postal_code(value: str) -> str:
    """Mask a CEP as ``#####-###``."""
    digits = only_digits(value)[:POSTAL_CODE_LENGTH]
    if len(digits) <= 5:
        return digits
    return f"{digits[:5]}-{digits[5:]}"


def format_account_number(value: str) -> str:
    """Mask an account number as ``######-#``.

    Up to six digits are returned unchanged; from the seventh digit on the
    last digit is the check digit and is split off with a hyphen.

    Examples
    --------
    >>> format_account_number("123456")
    '123456'
    >>> format_account_number("1234567")
    '123456-7'
    """
    digits = only_digits(value)[:ACCOUNT_NUMBER_MAX_LENGTH]
    if len(digits) <= ACCOUNT_BODY_LENGTH:
        return digits
    return f"{digits[:-1]}-{digits[-1]}"
