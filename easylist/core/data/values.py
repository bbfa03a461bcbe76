#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Typed values exchanged with the remote list package.

Arguments and replies are plain Python values restricted to a small set of
tags. Replies are decoded with one function per expected shape; each one
raises ``DecodingError`` on mismatch instead of coercing.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from ..utils.exceptions import DecodingError, InvalidValueError


class ValueType(str, Enum):
    """
    Tags a value can carry on its way to or from the server.
    """

    NIL = "nil"
    INTEGER = "integer"
    BYTES = "bytes"
    STRING = "string"
    LIST = "list"
    MAP = "map"

    @classmethod
    def of(cls, value: Any) -> Optional["ValueType"]:
        """
        Classify a value, returning ``None`` when it has no valid tag.

        ``bool`` is not an integer here even though Python says otherwise.
        """
        if value is None:
            return cls.NIL
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, (bytes, bytearray)):
            return cls.BYTES
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple)):
            return cls.LIST
        if isinstance(value, dict):
            return cls.MAP
        return None


def validate_value(value: Any, operation: Optional[str] = None) -> Any:
    """
    Check that ``value`` (recursively) is a typed value and return it.
    """
    value_type = ValueType.of(value)
    if value_type is None:
        raise InvalidValueError(
            message="Unsupported value type: {0}".format(type(value).__name__),
            value_type=type(value).__name__,
            operation=operation,
        )
    if value_type is ValueType.LIST:
        for item in value:
            validate_value(item, operation)
    elif value_type is ValueType.MAP:
        for map_key, map_value in value.items():
            if ValueType.of(map_key) in (None, ValueType.LIST, ValueType.MAP):
                raise InvalidValueError(
                    message="Unsupported map key type: {0}".format(
                        type(map_key).__name__
                    ),
                    value_type=type(map_key).__name__,
                    operation=operation,
                )
            validate_value(map_value, operation)
    return value


def validate_integer(value: Any, operation: Optional[str] = None) -> int:
    if ValueType.of(value) is not ValueType.INTEGER:
        raise InvalidValueError(
            message="Expected an integer, got {0}".format(type(value).__name__),
            value_type=type(value).__name__,
            operation=operation,
        )
    return value


def expect_integer(reply: Any, operation: Optional[str] = None) -> int:
    """Decode a scalar integer reply."""
    if ValueType.of(reply) is not ValueType.INTEGER:
        raise DecodingError(
            expected=ValueType.INTEGER.value,
            actual_type=type(reply).__name__,
            operation=operation,
        )
    return int(reply)


def expect_list(reply: Any, operation: Optional[str] = None) -> List[Any]:
    """Decode an ordered sequence reply. An empty list is a valid result."""
    if ValueType.of(reply) is not ValueType.LIST:
        raise DecodingError(
            expected=ValueType.LIST.value,
            actual_type=type(reply).__name__,
            operation=operation,
        )
    return list(reply)


def expect_mapping(reply: Any, operation: Optional[str] = None) -> Dict[Any, Any]:
    """Decode a mapping reply whose keys are strings or bytes."""
    if ValueType.of(reply) is not ValueType.MAP:
        raise DecodingError(
            expected=ValueType.MAP.value,
            actual_type=type(reply).__name__,
            operation=operation,
        )
    for map_key in reply:
        if ValueType.of(map_key) not in (ValueType.STRING, ValueType.BYTES):
            raise DecodingError(
                expected="map with string keys",
                actual_type="map key {0}".format(type(map_key).__name__),
                operation=operation,
            )
    return dict(reply)
