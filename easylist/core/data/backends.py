import base64
import json
from typing import Any, Protocol, runtime_checkable

from ..utils.exceptions import ExceptionTranslator, SerializationError


@runtime_checkable
class SerializationBackend(Protocol):
    """Protocol defining the interface for serialization backends"""

    def serialize(self, obj: Any) -> bytes:
        """Serialize an object to bytes"""
        ...

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes back to object"""
        ...


class JSONBackend:
    """JSON serialization backend that keeps bytes and non-string map keys"""

    TYPE_MARKER = "__type__"

    def _encode_recursive(self, obj: Any) -> Any:
        """
        Recursively encode values JSON cannot represent directly.

        Tuples become plain arrays: the server has a single list type.
        """
        if isinstance(obj, dict):
            if all(isinstance(k, str) for k in obj) and self.TYPE_MARKER not in obj:
                return {k: self._encode_recursive(v) for k, v in obj.items()}
            return {
                self.TYPE_MARKER: "map",
                "entries": [
                    [self._encode_recursive(k), self._encode_recursive(v)]
                    for k, v in obj.items()
                ],
            }
        if isinstance(obj, (list, tuple)):
            return [self._encode_recursive(item) for item in obj]
        if isinstance(obj, (bytes, bytearray)):
            return {
                self.TYPE_MARKER: "bytes",
                "data": base64.b64encode(bytes(obj)).decode("ascii"),
            }
        return obj

    def _decode_recursive(self, obj: Any) -> Any:
        """Recursively decode marker objects"""
        if isinstance(obj, dict):
            type_name = obj.get(self.TYPE_MARKER)
            if type_name == "bytes":
                return base64.b64decode(obj["data"])
            if type_name == "map":
                return {
                    self._hashable(self._decode_recursive(k)): self._decode_recursive(v)
                    for k, v in obj["entries"]
                }
            return {k: self._decode_recursive(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [self._decode_recursive(item) for item in obj]
        return obj

    @staticmethod
    def _hashable(value: Any) -> Any:
        if isinstance(value, list):
            raise ValueError("map keys cannot be lists")
        return value

    def serialize(self, obj: Any) -> bytes:
        try:
            encoded_obj = self._encode_recursive(obj)
            return json.dumps(encoded_obj, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ExceptionTranslator.as_serialization_error(
                e,
                operation="serialize",
                serialization_format="json",
                data_type=type(obj).__name__,
            ) from e

    def deserialize(self, data: bytes) -> Any:
        if not data:
            return None
        try:
            obj = json.loads(data.decode("utf-8"))
            return self._decode_recursive(obj)
        except (ValueError, KeyError, TypeError) as e:
            # json.JSONDecodeError, UnicodeDecodeError and binascii.Error are ValueErrors
            raise SerializationError(
                operation="deserialize",
                message=f"JSON deserialization failed: {e}",
                serialization_format="json",
                cause=e,
            ) from e
