"""
Request body encoding.

Typed parameter objects are first reduced to a JSON-like tree with
:func:`to_wire`, then :func:`flatten_form` turns the tree into the
bracket-indexed ``application/x-www-form-urlencoded`` pairs the API expects::

    {"metadata": {"order": "42"}, "payment_methods": ["card", "gcash"]}

becomes::

    [("metadata[order]", "42"),
     ("payment_methods[0]", "card"),
     ("payment_methods[1]", "gcash")]
"""

from __future__ import annotations

import dataclasses
import json
import math
from datetime import datetime
from enum import Enum
from typing import Any, List, Mapping, Tuple, Union

from .errors import JsonError
from .types import to_unix

__all__ = ["FormPairs", "flatten_form", "to_wire"]

FormPairs = List[Tuple[str, str]]


def to_wire(value: Any) -> Any:
    """
    Reduce a typed request body to plain ``dict``/``list``/scalar values.

    Dataclass fields set to ``None`` are dropped so optional parameters are
    not sent at all. Raises :class:`JsonError` for values that have no JSON
    representation.
    """
    if isinstance(value, Enum):
        return to_wire(value.value)
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise JsonError(f"cannot encode non-finite number {value!r}")
        return value
    if isinstance(value, datetime):
        return to_unix(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_wire(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, Mapping):
        encoded = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise JsonError(f"object keys must be strings, got {key!r}")
            encoded[key] = to_wire(item)
        return encoded
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    raise JsonError(f"cannot encode value of type {type(value).__name__}")


def _scalar_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # bool, int, float and None all have a canonical JSON spelling.
    return json.dumps(value, separators=(",", ":"))


def _flatten_into(prefix: str, obj: Mapping[str, Any], form: FormPairs) -> None:
    for key, value in obj.items():
        field_name = key if not prefix else f"{prefix}[{key}]"

        if isinstance(value, Mapping):
            _flatten_into(field_name, value, form)
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                item_name = f"{field_name}[{index}]"
                if isinstance(item, Mapping):
                    _flatten_into(item_name, item, form)
                else:
                    form.append((item_name, _scalar_text(item)))
        elif value is None:
            continue
        else:
            form.append((field_name, _scalar_text(value)))


def flatten_form(body: Any) -> Union[FormPairs, Any]:
    """
    Flatten a JSON-like object into form pairs.

    A body that is not an object is returned untouched and sent as an opaque
    payload.
    """
    if not isinstance(body, Mapping):
        return body
    form: FormPairs = []
    _flatten_into("", body, form)
    return form
