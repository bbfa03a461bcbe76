#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Value objects passed between list handles and executors.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple, Union


class ConsistencyLevel(str, Enum):
    """
    Read consistency requested from the server.
    """

    ONE = "one"
    ALL = "all"


@dataclass(frozen=True)
class Policy:
    """
    Generic call parameters. Handles pass this through without reading it.
    """

    timeout_ms: Optional[int] = None
    max_retries: int = 0
    consistency_level: ConsistencyLevel = ConsistencyLevel.ONE
    send_key: bool = False


@dataclass(frozen=True)
class Key:
    """
    Record address: namespace, set and user key.
    """

    namespace: str
    set_name: str
    user_key: Union[int, str, bytes]


@dataclass(frozen=True)
class UdfCall:
    """
    One remote invocation: package, function and ordered arguments.
    """

    package_name: str
    function_name: str
    args: Tuple[Any, ...] = field(default_factory=tuple)

    def arg_list(self):
        return list(self.args)
