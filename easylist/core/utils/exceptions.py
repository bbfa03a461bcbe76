#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exception hierarchy for EasyList.

Errors raised by executors (transport or remote UDF failures) are kept apart
from errors raised while decoding a reply, so callers can tell "the server
said no" from "the server answered with the wrong shape".

Author: Silan Hu (silan.hu@u.nus.edu)
"""

from typing import Any, Dict, Optional


class EasyListError(Exception):
    """
    Base class for all EasyList errors.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.cause = cause

    def tag_operation(self, operation: str) -> "EasyListError":
        """
        Record the list operation that failed, keeping an existing tag.
        """
        if not self.operation:
            self.operation = operation
        return self

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "operation": self.operation,
        }
        if self.cause is not None:
            data["cause"] = "{0}: {1}".format(type(self.cause).__name__, self.cause)
        return data

    def __str__(self) -> str:
        if self.operation:
            return "[{0}] {1}".format(self.operation, self.message)
        return self.message


class RemoteExecutionError(EasyListError):
    """
    The remote call could not be completed or the UDF reported an error.
    """

    def __init__(
        self,
        function_name: str,
        message: str,
        package_name: Optional[str] = None,
        error_code: Optional[str] = None,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message=message, operation=operation, cause=cause)
        self.function_name = function_name
        self.package_name = package_name
        self.error_code = error_code

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "function_name": self.function_name,
                "package_name": self.package_name,
                "error_code": self.error_code,
            }
        )
        return data


class DecodingError(EasyListError, TypeError):
    """
    A reply did not have the shape the operation expects.
    """

    def __init__(
        self,
        expected: str,
        actual_type: str,
        operation: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=message
            or "Expected {0} reply, got {1}".format(expected, actual_type),
            operation=operation,
        )
        self.expected = expected
        self.actual_type = actual_type


class InvalidValueError(EasyListError, ValueError):
    """
    An argument cannot be sent as a typed value.
    """

    def __init__(
        self,
        message: str,
        value_type: Optional[str] = None,
        operation: Optional[str] = None,
    ) -> None:
        super().__init__(message=message, operation=operation)
        self.value_type = value_type


class SerializationError(EasyListError):
    """
    Encoding or decoding a payload failed.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        data_type: Optional[str] = None,
        serialization_format: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message=message, cause=cause)
        self.codec_operation = operation
        self.data_type = data_type
        self.serialization_format = serialization_format


class ConfigurationError(EasyListError, ValueError):
    """
    Invalid configuration value.
    """

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        super().__init__(message=message)
        self.config_key = config_key


class ExceptionTranslator:
    """
    Helpers that map foreign exceptions onto the EasyList taxonomy.
    """

    @staticmethod
    def as_serialization_error(
        exc: BaseException,
        operation: str,
        serialization_format: str,
        data_type: Optional[str] = None,
    ) -> SerializationError:
        if isinstance(exc, SerializationError):
            return exc
        return SerializationError(
            operation=operation,
            message="{0} {1} failed: {2}".format(
                serialization_format.upper(), operation, exc
            ),
            data_type=data_type,
            serialization_format=serialization_format,
            cause=exc,
        )


__all__ = [
    "EasyListError",
    "RemoteExecutionError",
    "DecodingError",
    "InvalidValueError",
    "SerializationError",
    "ConfigurationError",
    "ExceptionTranslator",
]
