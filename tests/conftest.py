#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
import os
import traceback

import pytest

HERE = os.path.dirname(__file__)
FIXTURES_DIR = os.path.abspath(os.path.join(HERE, "fixtures"))


class Logger:
    def __init__(self, silent=True):
        self.logs = []
        self.silent = silent

    def debug(self, msg, exc_info=False):
        if not self.silent:
            print(msg)
        self.logs.append(msg)
        if exc_info:
            self.logs.append(traceback.format_exc())

    def assert_present(self, lines):
        if isinstance(lines, str):
            lines = [lines]
        for msg in lines:
            found = False
            for log in self.logs:
                if isinstance(log, str) and msg in log:
                    found = True
                    break
            if not found:
                raise AssertionError(f"'{msg}' not found in {self.logs}")

    def assert_not_present(self, lines):
        if isinstance(lines, str):
            lines = [lines]
        for msg in lines:
            for log in self.logs:
                if isinstance(log, str) and msg in log:
                    raise AssertionError(f"'{msg}' found in {self.logs}")

    error = exception = critical = info = warning = debug


@pytest.fixture
def set_env():
    old = os.environ.get("ESTEMPLATE_LOG_LEVEL")
    os.environ["ESTEMPLATE_LOG_LEVEL"] = "debug"
    try:
        yield
    finally:
        if old is None:
            del os.environ["ESTEMPLATE_LOG_LEVEL"]
        else:
            os.environ["ESTEMPLATE_LOG_LEVEL"] = old


@pytest.fixture
def patch_logger(silent=True):
    new_logger = Logger(silent)

    from estemplate.logger import logger

    methods = ("exception", "error", "critical", "info", "debug", "warning")
    for method in methods:
        setattr(logger, f"_old_{method}", getattr(logger, method))
        setattr(logger, method, new_logger.info)

    try:
        yield new_logger
    finally:
        for method in methods:
            setattr(logger, method, getattr(logger, f"_old_{method}"))
            delattr(logger, f"_old_{method}")


@pytest.fixture
def fixture_path():
    def _path(name):
        return os.path.join(FIXTURES_DIR, name)

    return _path
