#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Executor contract used by list handles.

An executor runs one named function of a server-side package against one
record and returns the raw reply. List handles stay focused on shaping
arguments and decoding replies; everything about reaching the server is
delegated here.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Optional

from ..data.models import UdfCall

if TYPE_CHECKING:
    from ...large_list import LargeList


class RecordExecutor(ABC):
    """
    Runtime contract for executing record UDF calls.

    Implementations must be safe to call from several threads at once and
    should raise ``RemoteExecutionError`` when the call cannot be completed
    or the remote function reports an error. Other exception types reach the
    caller unchanged, with the list operation attached as a note on 3.11+.
    """

    @abstractmethod
    def execute(
        self,
        policy: Any,
        key: Any,
        package_name: str,
        function_name: str,
        args: List[Any],
    ) -> Any:
        """
        Execute ``package_name.function_name(*args)`` against ``key``.
        """

    def execute_call(self, policy: Any, key: Any, call: UdfCall) -> Any:
        return self.execute(
            policy, key, call.package_name, call.function_name, call.arg_list()
        )

    def large_list(
        self,
        key: Any,
        bin_name: str,
        user_module: Optional[str] = None,
        policy: Any = None,
    ) -> "LargeList":
        """
        Return a list handle bound to ``key``/``bin_name`` on this executor.
        """
        from ...large_list import LargeList

        return LargeList(
            executor=self,
            policy=policy,
            key=key,
            bin_name=bin_name,
            user_module=user_module,
        )
