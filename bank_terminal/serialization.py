"""Conversion between model dataclasses and backend JSON payloads.

Each model field maps to a payload key through its ``json`` metadata
(see ``bank_terminal.models.base.api_field``); fields without it use their
own name.
"""

import logging
import types
import unicodedata
from dataclasses import MISSING, fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

from bank_terminal.exceptions import UnknownAccountKindError
from bank_terminal.models.account import ACCOUNT_CLASSES, Account
from bank_terminal.models.enums import AccountKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNION_TYPES = (Union, types.UnionType)


def payload_key(f: Any) -> str:
    """Payload key of a dataclass field."""
    return f.metadata.get("json", f.name)


def to_payload(obj: Any) -> dict[str, Any]:
    """Convert a model dataclass to a JSON-ready payload.

    ``None`` fields are omitted, so optional request fields and partial
    updates only send what was set.
    """
    payload = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        payload[payload_key(f)] = serialize_value(value)
    return payload


def serialize_value(value: Any) -> Any:
    """Serialize a value for a JSON request body."""
    if isinstance(value, Decimal):
        return float(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value):
        return to_payload(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def from_payload(cls: type[T], data: dict[str, Any]) -> T:
    """Build a model dataclass from a backend payload.

    Unknown keys are ignored. Missing keys fall back to the field default,
    or to ``None`` when the field has none. Enum values the client does not
    know are kept as the raw string.

    Parameters
    ----------
    cls : type
        Target dataclass.
    data : dict
        Decoded JSON object.

    Returns
    -------
    T
        Populated instance.
    """
    hints = get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        key = payload_key(f)
        if key in data:
            kwargs[f.name] = coerce_value(hints[f.name], data[key])
        elif f.default is MISSING and f.default_factory is MISSING:
            kwargs[f.name] = None
    return cls(**kwargs)


def coerce_value(tp: Any, value: Any) -> Any:
    """Coerce a decoded JSON value to the annotated field type."""
    if value is None or tp is Any:
        return value

    origin = get_origin(tp)
    if origin in _UNION_TYPES:
        args = [a for a in get_args(tp) if a is not type(None)]
        for arg in args:
            if arg in (bool, str, int) and type(value) is arg:
                return value
        return coerce_value(args[0], value)
    if origin is list:
        (item_type,) = get_args(tp)
        return [coerce_value(item_type, v) for v in value]
    if origin is dict:
        return dict(value)

    if is_dataclass(tp):
        return from_payload(tp, value)
    if isinstance(tp, type) and issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError:
            logger.debug("Unknown %s value %r kept as-is", tp.__name__, value)
            return value
    if tp is Decimal:
        return Decimal(str(value))
    if tp is datetime:
        return value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if tp is date:
        return value if isinstance(value, date) else date.fromisoformat(value[:10])
    if tp is bool:
        return value if isinstance(value, bool) else str(value).lower() == "true"
    if tp in (int, str, float):
        return tp(value)
    return value


# Keywords looked up in the normalized ``tipoConta`` label
_KIND_KEYWORDS: dict[str, AccountKind] = {
    "CORRENTE": AccountKind.CORRENTE,
    "POUPANCA": AccountKind.POUPANCA,
    "JOVEM": AccountKind.JOVEM,
    "GLOBAL": AccountKind.GLOBAL,
    "INTERNACIONAL": AccountKind.GLOBAL,
}

# Kind-specific payload keys, checked in order when the label says nothing
_KIND_FIELDS: list[tuple[tuple[str, ...], AccountKind]] = [
    (("saldoDolar", "codigoSwift"), AccountKind.GLOBAL),
    (("numeroContaResponsavel",), AccountKind.JOVEM),
    (("diaAniversario", "rendimento"), AccountKind.POUPANCA),
    (("limiteChequeEspecial",), AccountKind.CORRENTE),
]


def _normalize_label(label: str) -> str:
    decomposed = unicodedata.normalize("NFKD", label)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).upper()


def account_kind(data: dict[str, Any]) -> AccountKind:
    """Determine the kind of an account payload.

    Raises
    ------
    UnknownAccountKindError
        If neither the label nor the fields identify a kind.
    """
    label = _normalize_label(str(data.get("tipoConta") or ""))
    for keyword, kind in _KIND_KEYWORDS.items():
        if keyword in label:
            return kind

    for keys, kind in _KIND_FIELDS:
        if any(data.get(key) is not None for key in keys):
            return kind

    raise UnknownAccountKindError(
        f"Cannot determine account kind (tipoConta={data.get('tipoConta')!r}, id={data.get('id')!r})"
    )


def parse_account(data: dict[str, Any]) -> Account:
    """Build the account dataclass matching the payload's kind."""
    return from_payload(ACCOUNT_CLASSES[account_kind(data)], data)
