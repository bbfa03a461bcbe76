#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the gRPC record executor envelope and error translation.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

import grpc
import pytest

from easylist.core.config import EasyListConfig
from easylist.core.data.backends import JSONBackend
from easylist.core.data.models import ConsistencyLevel, Key, Policy
from easylist.core.executors.grpc_executor import GrpcRecordExecutor
from easylist.core.utils.exceptions import DecodingError, RemoteExecutionError, SerializationError


class FakeRpcError(grpc.RpcError):
    def code(self):
        return grpc.StatusCode.UNAVAILABLE

    def details(self):
        return "connection refused"


class FakeChannel:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.methods = []
        self.requests = []

    def unary_unary(self, method, *args, **kwargs):
        self.methods.append(method)

        def _call(request, timeout=None, metadata=None):
            self.requests.append({"request": request, "timeout": timeout})
            if self.error is not None:
                raise self.error
            return JSONBackend().serialize(self.reply)

        return _call


KEY = Key("test", "demo", "user-1")


def test_request_envelope_carries_key_package_function_args_and_policy():
    channel = FakeChannel(reply={"result": 3})
    executor = GrpcRecordExecutor(channel)
    policy = Policy(timeout_ms=1500, consistency_level=ConsistencyLevel.ALL)

    result = executor.execute(policy, KEY, "llist", "size", ["scores"])

    assert result == 3
    assert channel.methods == ["/easylist.RecordService/Execute"]
    sent = JSONBackend().deserialize(channel.requests[0]["request"])
    assert sent == {
        "key": {"namespace": "test", "set_name": "demo", "user_key": "user-1"},
        "package": "llist",
        "function": "size",
        "args": ["scores"],
        "policy": {
            "timeout_ms": 1500,
            "max_retries": 0,
            "consistency_level": "all",
            "send_key": False,
        },
    }
    assert channel.requests[0]["timeout"] == pytest.approx(1.5)


def test_no_policy_means_no_deadline():
    channel = FakeChannel(reply={"result": None})

    GrpcRecordExecutor(channel).execute(None, KEY, "llist", "destroy", ["scores"])

    assert channel.requests[0]["timeout"] is None
    sent = JSONBackend().deserialize(channel.requests[0]["request"])
    assert sent["policy"] is None


def test_method_can_come_from_config():
    channel = FakeChannel(reply={"result": []})
    config = EasyListConfig(grpc_method="/records.Udf/Apply")

    GrpcRecordExecutor(channel, config=config)

    assert channel.methods == ["/records.Udf/Apply"]


def test_bytes_arguments_survive_the_envelope():
    channel = FakeChannel(reply={"result": [b"\x01\x02"]})

    result = GrpcRecordExecutor(channel).execute(
        None, KEY, "llist", "find", ["scores", b"\x01\x02"]
    )

    assert result == [b"\x01\x02"]
    sent = JSONBackend().deserialize(channel.requests[0]["request"])
    assert sent["args"] == ["scores", b"\x01\x02"]


def test_remote_error_envelope_raises_remote_execution_error():
    channel = FakeChannel(
        reply={"error": {"code": "LDT_TOP_REC_NOT_FOUND", "message": "list not found"}}
    )

    with pytest.raises(RemoteExecutionError) as exc_info:
        GrpcRecordExecutor(channel).execute(None, KEY, "llist", "scan", ["scores"])

    error = exc_info.value
    assert error.function_name == "scan"
    assert error.package_name == "llist"
    assert error.error_code == "LDT_TOP_REC_NOT_FOUND"
    assert error.message == "list not found"


def test_rpc_error_is_translated_with_status_code():
    channel = FakeChannel(error=FakeRpcError())

    with pytest.raises(RemoteExecutionError) as exc_info:
        GrpcRecordExecutor(channel).execute(None, KEY, "llist", "add", ["scores", 1, None])

    error = exc_info.value
    assert error.error_code == "UNAVAILABLE"
    assert error.message == "connection refused"
    assert isinstance(error.cause, FakeRpcError)


def test_malformed_reply_envelope_is_a_remote_error():
    channel = FakeChannel(reply=[1, 2, 3])

    with pytest.raises(RemoteExecutionError):
        GrpcRecordExecutor(channel).execute(None, KEY, "llist", "scan", ["scores"])


def test_large_list_over_grpc_executor_tags_and_decodes():
    executor = GrpcRecordExecutor(FakeChannel(reply={"result": {"Capacity": 10}}))
    handle = executor.large_list(KEY, "scores")

    assert handle.get_config() == {"Capacity": 10}

    with pytest.raises(DecodingError):
        handle.size()

    failing = GrpcRecordExecutor(FakeChannel(error=FakeRpcError())).large_list(KEY, "scores")
    with pytest.raises(RemoteExecutionError) as exc_info:
        failing.set_capacity(5)
    assert exc_info.value.operation == "set_capacity"


class RawReplyChannel(FakeChannel):
    """Returns the configured bytes verbatim instead of encoding a reply."""

    def unary_unary(self, method, *args, **kwargs):
        self.methods.append(method)

        def _call(request, timeout=None, metadata=None):
            self.requests.append({"request": request, "timeout": timeout})
            return self.reply

        return _call


@pytest.mark.parametrize("raw_reply", [b'{"error": {}}', b'{"error": null}', b'{"error": ""}'])
def test_empty_error_envelope_still_fails_void_operations(raw_reply):
    handle = GrpcRecordExecutor(RawReplyChannel(reply=raw_reply)).large_list(KEY, "scores")

    with pytest.raises(RemoteExecutionError) as exc_info:
        handle.add(1)

    assert exc_info.value.message == "remote function failed"
    assert exc_info.value.operation == "add"


def test_envelope_without_result_or_error_is_rejected():
    handle = GrpcRecordExecutor(RawReplyChannel(reply=b"{}")).large_list(KEY, "scores")

    with pytest.raises(RemoteExecutionError) as exc_info:
        handle.destroy()

    assert "Malformed reply envelope" in exc_info.value.message
    assert exc_info.value.operation == "destroy"


def test_explicit_null_result_is_a_valid_void_reply():
    handle = GrpcRecordExecutor(RawReplyChannel(reply=b'{"result": null}')).large_list(
        KEY, "scores"
    )

    assert handle.set_capacity(10) is None


@pytest.mark.parametrize("raw_reply", [b"\xff not json", b"{truncated"])
def test_undecodable_reply_bytes_become_remote_execution_error(raw_reply):
    handle = GrpcRecordExecutor(RawReplyChannel(reply=raw_reply)).large_list(KEY, "scores")

    with pytest.raises(RemoteExecutionError) as exc_info:
        handle.scan()

    error = exc_info.value
    assert not isinstance(error, SerializationError)
    assert isinstance(error.cause, SerializationError)
    assert error.function_name == "scan"
    assert error.operation == "scan"
