#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pytest bootstrap for local package imports and config isolation.

Author: Silan Hu (silan.hu@u.nus.edu)
"""

import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _isolated_easylist_config(monkeypatch):
    """
    Start every test from built-in defaults, ignoring EASYLIST_* variables
    set in the developer's shell.
    """
    from easylist.core import config as config_module

    for env_key in ("EASYLIST_PACKAGE", "EASYLIST_USER_MODULE", "EASYLIST_LOG_LEVEL", "EASYLIST_GRPC_METHOD"):
        monkeypatch.delenv(env_key, raising=False)
    monkeypatch.setattr(config_module, "_global_config", None)
    yield
