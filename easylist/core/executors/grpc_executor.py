#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
gRPC-backed record executor.

Sends each UDF call as one unary request on a channel owned by the caller.
The channel's lifetime, credentials and pooling stay with the caller; this
module only frames the request and interprets the reply envelope.

Request envelope::

    {"key": ..., "package": ..., "function": ..., "args": [...], "policy": ...}

Reply envelope::

    {"result": ...}  or  {"error": {"code": ..., "message": ...}}

Author: Silan Hu (silan.hu@u.nus.edu)
"""

import dataclasses
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import grpc

from ..config import EasyListConfig, get_config
from ..data.backends import JSONBackend, SerializationBackend
from ..utils.exceptions import RemoteExecutionError, SerializationError
from ..utils.logger import ModernLogger
from .base import RecordExecutor


def _to_wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _to_wire(getattr(value, f.name)) for f in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {k: _to_wire(v) for k, v in value.items()}
    return value


class GrpcRecordExecutor(RecordExecutor, ModernLogger):
    """
    Execute record UDF calls through a generic gRPC unary method.
    """

    def __init__(
        self,
        channel: grpc.Channel,
        backend: Optional[SerializationBackend] = None,
        method: Optional[str] = None,
        config: Optional[EasyListConfig] = None,
    ) -> None:
        self.config = config or get_config()
        ModernLogger.__init__(self, name="GrpcRecordExecutor")
        self.backend = backend or JSONBackend()
        self.method = method or self.config.grpc_method
        # Raw bytes in and out; the backend handles framing.
        self._call = channel.unary_unary(self.method)

    @staticmethod
    def _timeout_seconds(policy: Any) -> Optional[float]:
        timeout_ms = getattr(policy, "timeout_ms", None)
        if timeout_ms is None or timeout_ms <= 0:
            return None
        return timeout_ms / 1000.0

    def _build_request(
        self,
        policy: Any,
        key: Any,
        package_name: str,
        function_name: str,
        args: List[Any],
    ) -> Dict[str, Any]:
        return {
            "key": _to_wire(key),
            "package": package_name,
            "function": function_name,
            "args": list(args),
            "policy": _to_wire(policy),
        }

    def _unwrap_reply(
        self, reply: Any, package_name: str, function_name: str
    ) -> Any:
        if not isinstance(reply, Mapping):
            raise RemoteExecutionError(
                function_name=function_name,
                package_name=package_name,
                message="Malformed reply envelope: {0}".format(type(reply).__name__),
            )
        if "error" in reply:
            error = reply["error"]
            if isinstance(error, Mapping):
                code = error.get("code")
                message = error.get("message") or "remote function failed"
            else:
                code = None
                message = str(error) if error else "remote function failed"
            raise RemoteExecutionError(
                function_name=function_name,
                package_name=package_name,
                error_code=None if code is None else str(code),
                message=str(message),
            )
        if "result" not in reply:
            raise RemoteExecutionError(
                function_name=function_name,
                package_name=package_name,
                message="Malformed reply envelope: neither 'result' nor 'error' present",
            )
        return reply["result"]

    def execute(
        self,
        policy: Any,
        key: Any,
        package_name: str,
        function_name: str,
        args: List[Any],
    ) -> Any:
        request = self.backend.serialize(
            self._build_request(policy, key, package_name, function_name, args)
        )
        self.debug(
            "Calling %s %s.%s (%d bytes)",
            self.method,
            package_name,
            function_name,
            len(request),
        )
        try:
            raw_reply = self._call(request, timeout=self._timeout_seconds(policy))
        except grpc.RpcError as e:
            code = e.code() if hasattr(e, "code") else None
            details = e.details() if hasattr(e, "details") else None
            code_name = getattr(code, "name", None) if code is not None else None
            self.warning(
                "gRPC call %s.%s failed: %s %s",
                package_name,
                function_name,
                code_name,
                details,
            )
            raise RemoteExecutionError(
                function_name=function_name,
                package_name=package_name,
                error_code=code_name,
                message=details or "gRPC call failed",
                cause=e,
            ) from e
        try:
            reply = self.backend.deserialize(raw_reply)
        except SerializationError as e:
            self.warning("Undecodable reply for %s.%s: %s", package_name, function_name, e)
            raise RemoteExecutionError(
                function_name=function_name,
                package_name=package_name,
                message="Undecodable reply: {0}".format(e.message),
                cause=e,
            ) from e
        return self._unwrap_reply(reply, package_name, function_name)
