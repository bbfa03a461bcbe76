#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data models, typed values and codecs for EasyList.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from .backends import JSONBackend, SerializationBackend
from .models import ConsistencyLevel, Key, Policy, UdfCall
from .values import (
    ValueType,
    expect_integer,
    expect_list,
    expect_mapping,
    validate_integer,
    validate_value,
)

__all__ = [
    "JSONBackend",
    "SerializationBackend",
    "ConsistencyLevel",
    "Key",
    "Policy",
    "UdfCall",
    "ValueType",
    "expect_integer",
    "expect_list",
    "expect_mapping",
    "validate_integer",
    "validate_value",
]
