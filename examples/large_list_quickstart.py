#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Large list walkthrough against a gRPC record service.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

import os

import grpc

from easylist import GrpcRecordExecutor, Key, Policy

SERVICE_ADDRESS = os.getenv("EASYLIST_SERVICE_ADDRESS", "127.0.0.1:50051")


class LargeListDemo:
    """
    Builds a list of scores, filters it and reads its configuration.
    """

    def __init__(self, channel: grpc.Channel) -> None:
        executor = GrpcRecordExecutor(channel)
        self.scores = executor.large_list(
            Key("test", "demo", "player-1"),
            "scores",
            policy=Policy(timeout_ms=2000),
        )

    def run(self) -> None:
        self.scores.add(42)
        self.scores.add_all([7, 19, 88])
        self.scores.set_capacity(1000)

        print(f"size -> {self.scores.size()}")
        print(f"capacity -> {self.scores.get_capacity()}")
        print(f"find(19) -> {self.scores.find(19)}")
        print(f"filter(range_filter, 10, 50) -> {self.scores.filter('range_filter', 10, 50)}")
        print(f"config -> {self.scores.get_config()}")

        self.scores.destroy()


if __name__ == "__main__":
    with grpc.insecure_channel(SERVICE_ADDRESS) as channel:
        LargeListDemo(channel).run()
