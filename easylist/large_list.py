#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Large list handle.

A ``LargeList`` is bound to one bin of one record. Every method turns into a
single call of the server-side ``llist`` package; the list itself (ordering,
capacity, filters) lives on the server. The handle keeps no copy of the list
and never retries.

Usage Example:
    >>> executor = GrpcRecordExecutor(channel)
    >>> scores = LargeList(executor, None, Key("test", "demo", "user-1"), "scores")
    >>> scores.add(42)
    >>> scores.add_all([7, 9])
    >>> scores.size()
    3
    >>> scores.filter("range_filter", 5, 10)
    [7, 9]

Author: Silan Hu (silan.hu@u.nus.edu)
"""

import asyncio
from typing import Any, Dict, Iterable, List, Optional

from .core.config import EasyListConfig, get_config
from .core.data.models import UdfCall
from .core.data.values import (
    expect_integer,
    expect_list,
    expect_mapping,
    validate_integer,
    validate_value,
)
from .core.executors.base import RecordExecutor
from .core.utils.exceptions import ConfigurationError, DecodingError, EasyListError, InvalidValueError
from .core.utils.logger import ModernLogger


class LargeList(ModernLogger):
    """
    Create and manage a list within a single bin.

    Args:
        executor: object providing ``execute(policy, key, package_name,
            function_name, args)``, usually a ``RecordExecutor``
        policy: generic call parameters, passed through untouched; ``None``
            for executor defaults
        key: record identifier, passed through untouched
        bin_name: bin holding the list
        user_module: server function that initializes list configuration,
            ``None`` for the default list
        config: EasyList settings; defaults to the process-wide config
    """

    def __init__(
        self,
        executor: RecordExecutor,
        policy: Any,
        key: Any,
        bin_name: str,
        user_module: Optional[str] = None,
        config: Optional[EasyListConfig] = None,
    ) -> None:
        config = config or get_config()
        ModernLogger.__init__(self, name="LargeList")

        if not isinstance(bin_name, str) or not bin_name:
            raise ConfigurationError("bin_name must be a non-empty string", config_key="bin_name")
        if user_module is None:
            user_module = config.default_user_module
        if user_module is not None and not isinstance(user_module, str):
            raise ConfigurationError(
                "user_module must be a string or None", config_key="user_module"
            )

        self._executor = executor
        self._policy = policy
        self._key = key
        self._bin_name = bin_name
        self._user_module = user_module
        self._package_name = config.package_name

    @property
    def executor(self) -> RecordExecutor:
        return self._executor

    @property
    def policy(self) -> Any:
        return self._policy

    @property
    def key(self) -> Any:
        return self._key

    @property
    def bin_name(self) -> str:
        return self._bin_name

    @property
    def user_module(self) -> Optional[str]:
        return self._user_module

    @property
    def package_name(self) -> str:
        return self._package_name

    def __repr__(self) -> str:
        return "LargeList(key={0!r}, bin_name={1!r}, user_module={2!r})".format(
            self._key, self._bin_name, self._user_module
        )

    def _invoke(self, operation: str, function_name: str, *args: Any) -> Any:
        call = UdfCall(
            package_name=self._package_name,
            function_name=function_name,
            args=(self._bin_name,) + args,
        )
        self.debug(
            "%s: %s.%s bin=%s", operation, call.package_name, call.function_name, self._bin_name
        )
        try:
            return self._executor.execute(
                self._policy,
                self._key,
                call.package_name,
                call.function_name,
                call.arg_list(),
            )
        except EasyListError as exc:
            exc.tag_operation(operation)
            raise
        except Exception as exc:
            # Foreign errors keep their type; the operation rides along as a note.
            if hasattr(exc, "add_note"):
                exc.add_note("easylist operation: {0}".format(operation))
            raise

    def _decode(self, decoder: Any, reply: Any, operation: str) -> Any:
        try:
            return decoder(reply, operation)
        except DecodingError as exc:
            self.warning("%s: %s", operation, exc.message)
            raise

    def add(self, value: Any) -> None:
        """
        Add a value to the list. If the list does not exist, the server
        creates it using the configured user module.
        """
        validate_value(value, "add")
        self._invoke("add", "add", value, self._user_module)

    def add_all(self, values: Iterable[Any]) -> None:
        """
        Add values to the list in one call. An empty iterable still issues
        the call with an empty list.
        """
        if isinstance(values, (str, bytes, bytearray, dict)):
            raise InvalidValueError(
                message="add_all expects an iterable of values, got {0}".format(
                    type(values).__name__
                ),
                value_type=type(values).__name__,
                operation="add_all",
            )
        items = list(values)
        validate_value(items, "add_all")
        self._invoke("add_all", "add_all", items, self._user_module)

    def remove(self, value: Any) -> None:
        """Delete value from list."""
        validate_value(value, "remove")
        self._invoke("remove", "remove", value)

    def find(self, value: Any) -> List[Any]:
        """
        Select values from list. Returns an empty list when nothing matches.
        """
        validate_value(value, "find")
        reply = self._invoke("find", "find", value)
        return self._decode(expect_list, reply, "find")

    def find_then_filter(self, value: Any, filter_name: str, *filter_args: Any) -> List[Any]:
        """
        Select values from list and apply a server-side filter function.

        ``filter_args`` travel as one list argument, empty when none are given.
        """
        validate_value(value, "find_then_filter")
        packed_args = self._pack_filter_args("find_then_filter", filter_name, filter_args)
        reply = self._invoke(
            "find_then_filter",
            "find_then_filter",
            value,
            self._user_module,
            filter_name,
            packed_args,
        )
        return self._decode(expect_list, reply, "find_then_filter")

    def scan(self) -> List[Any]:
        """Return all objects in the list."""
        reply = self._invoke("scan", "scan")
        return self._decode(expect_list, reply, "scan")

    def filter(self, filter_name: str, *filter_args: Any) -> List[Any]:
        """
        Apply a server-side filter function to every entry in the list.
        """
        packed_args = self._pack_filter_args("filter", filter_name, filter_args)
        reply = self._invoke(
            "filter", "filter", self._user_module, filter_name, packed_args
        )
        return self._decode(expect_list, reply, "filter")

    def destroy(self) -> None:
        """Delete bin containing the list."""
        self._invoke("destroy", "destroy")

    def size(self) -> int:
        """Return size of list."""
        reply = self._invoke("size", "size")
        return self._decode(expect_integer, reply, "size")

    def get_config(self) -> Dict[Any, Any]:
        """Return map of list configuration parameters."""
        reply = self._invoke("get_config", "config")
        return self._decode(expect_mapping, reply, "get_config")

    def set_capacity(self, capacity: int) -> None:
        """Set maximum number of entries in the list."""
        validate_integer(capacity, "set_capacity")
        self._invoke("set_capacity", "set_capacity", capacity)

    def get_capacity(self) -> int:
        """Return maximum number of entries in the list."""
        reply = self._invoke("get_capacity", "get_capacity")
        return self._decode(expect_integer, reply, "get_capacity")

    @staticmethod
    def _pack_filter_args(operation: str, filter_name: str, filter_args: Iterable[Any]) -> List[Any]:
        if not isinstance(filter_name, str) or not filter_name:
            raise InvalidValueError(
                message="filter_name must be a non-empty string",
                value_type=type(filter_name).__name__,
                operation=operation,
            )
        packed = list(filter_args)
        validate_value(packed, operation)
        return packed


class AsyncLargeList:
    """
    Asyncio facade over ``LargeList``.

    Each coroutine runs the blocking call in a worker thread, so event loops
    stay responsive while the executor waits on the network.
    """

    def __init__(self, handle: LargeList) -> None:
        self._handle = handle

    @property
    def handle(self) -> LargeList:
        return self._handle

    async def add(self, value: Any) -> None:
        await asyncio.to_thread(self._handle.add, value)

    async def add_all(self, values: Iterable[Any]) -> None:
        await asyncio.to_thread(self._handle.add_all, values)

    async def remove(self, value: Any) -> None:
        await asyncio.to_thread(self._handle.remove, value)

    async def find(self, value: Any) -> List[Any]:
        return await asyncio.to_thread(self._handle.find, value)

    async def find_then_filter(self, value: Any, filter_name: str, *filter_args: Any) -> List[Any]:
        return await asyncio.to_thread(
            self._handle.find_then_filter, value, filter_name, *filter_args
        )

    async def scan(self) -> List[Any]:
        return await asyncio.to_thread(self._handle.scan)

    async def filter(self, filter_name: str, *filter_args: Any) -> List[Any]:
        return await asyncio.to_thread(self._handle.filter, filter_name, *filter_args)

    async def destroy(self) -> None:
        await asyncio.to_thread(self._handle.destroy)

    async def size(self) -> int:
        return await asyncio.to_thread(self._handle.size)

    async def get_config(self) -> Dict[Any, Any]:
        return await asyncio.to_thread(self._handle.get_config)

    async def set_capacity(self, capacity: int) -> None:
        await asyncio.to_thread(self._handle.set_capacity, capacity)

    async def get_capacity(self) -> int:
        return await asyncio.to_thread(self._handle.get_capacity)
