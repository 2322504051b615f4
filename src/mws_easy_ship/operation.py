"""
Operation builder for MWS requests.

MWS takes flat name/value query parameters. Composite values are flattened
with dotted names: mappings become ``Key.SubKey`` and lists become
``Key.member.N`` (1-based).
"""
from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from .errors import UnsupportedParameterValue

__all__ = ["Operation", "camelize", "format_value"]

_SCALARS = (str, int, float, Decimal)


def camelize(key: str) -> str:
    """
    Convert a snake_case or lowerCamel key to MWS UpperCamel.

    Keys that already start with an uppercase letter are returned unchanged
    so documented field names pass through as given.
    """
    if not key or key[0].isupper():
        return key
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"_+", key) if part)


def format_value(key: str, value: Any) -> str:
    """
    Render a scalar parameter value as an MWS string.

    Raises:
        UnsupportedParameterValue: If value is not a supported scalar
    """
    # bool must be checked before int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(key, value.value)
    if isinstance(value, datetime):
        if value.utcoffset() == timedelta(0):
            return value.replace(tzinfo=None).isoformat() + "Z"
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, _SCALARS):
        return str(value)
    raise UnsupportedParameterValue(key, value)


class Operation(dict):
    """
    Flattened parameters for a single MWS action.

    Always starts with the Action parameter. Further parameters are added
    with add() or store(), both of which return self for chaining.
    """

    def __init__(self, action: str):
        super().__init__(Action=action)

    @property
    def action(self) -> str:
        return self["Action"]

    def add(self, params: Optional[Mapping[str, Any]]) -> Operation:
        """
        Store every pair in params, preserving the mapping's order.

        Args:
            params: Field name to value mapping (None is a no-op)

        Returns:
            self
        """
        if params is None:
            return self
        for key, value in params.items():
            self.store(key, value)
        return self

    def store(self, key: str, value: Any) -> Operation:
        """
        Store one parameter, flattening composite values.

        Args:
            key: MWS field name (camelized if lowercase)
            value: Scalar, mapping, list/tuple or pydantic model

        Returns:
            self

        Raises:
            UnsupportedParameterValue: If a leaf value cannot be rendered
        """
        self._store(camelize(key), value)
        return self

    def _store(self, key: str, value: Any) -> None:
        # key is already in wire form here; "member" segments must stay lowercase
        if value is None:
            return
        if isinstance(value, BaseModel):
            value = value.model_dump(by_alias=True, exclude_none=True)
        if isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                self._store(f"{key}.{camelize(str(sub_key))}", sub_value)
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value, start=1):
                self._store(f"{key}.member.{index}", item)
        else:
            self[key] = format_value(key, value)
