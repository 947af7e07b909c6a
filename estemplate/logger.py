#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Logger -- sets the logging and provides a `logger` global object.
"""

import contextlib
import logging
import time
from datetime import datetime, timezone
from typing import Mapping, Optional, Tuple, Union

import ecs_logging
from dateutil.tz import tzlocal

from estemplate import __version__


class ColorFormatter(logging.Formatter):
    GREY = "\x1b[38;20m"
    GREEN = "\x1b[32;20m"
    YELLOW = "\x1b[33;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"
    COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    DATE_FMT = "%H:%M:%S"

    def __init__(self, prefix) -> None:
        self.custom_format = "[" + prefix + "][%(asctime)s][%(levelname)s] %(message)s"
        super().__init__(datefmt=self.DATE_FMT)
        self.local_tz = tzlocal()

    def converter(self, timestamp: float) -> datetime:
        dt = datetime.fromtimestamp(timestamp, self.local_tz)
        return dt.astimezone(timezone.utc)

    # override logging.Formatter to use an aware datetime object
    def formatTime(
        self, record: logging.LogRecord, datefmt: Optional[str] = None
    ) -> str:
        dt = self.converter(record.created)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.isoformat(timespec="milliseconds")

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        self._style._fmt = self.COLORS[record.levelno] + self.custom_format + self.RESET
        return super().format(record)


class ExtraLogger(logging.Logger):
    """Tags every record with the service type and version for ECS output."""

    def _log(
        self,
        level: int,
        msg: object,
        args: Union[Mapping[str, object], Tuple[object, ...]],
        exc_info=None,
        extra: Optional[Mapping[str, object]] = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        extra = dict(extra or {})
        extra.update(
            {
                "service.type": "estemplate",
                "service.version": __version__,
            }
        )
        super(ExtraLogger, self)._log(
            level, msg, args, exc_info, extra, stack_info, stacklevel
        )


_default_logger_class = logging.getLoggerClass()
logging.setLoggerClass(ExtraLogger)
logger: logging.Logger = logging.getLogger("estemplate")
logging.setLoggerClass(_default_logger_class)
logger_initialized = False


def set_logger(log_level: int = logging.INFO, filebeat: bool = False):
    global logger_initialized
    if filebeat:
        formatter = ecs_logging.StdlibFormatter()
    else:
        formatter = ColorFormatter("ESTPL")

    if not logger_initialized:
        logger.handlers.clear()
        handler = logging.StreamHandler()
        logger.addHandler(handler)
        logger_initialized = True

    logger.propagate = False
    logger.setLevel(log_level)
    logger.handlers[0].setLevel(log_level)
    logger.handlers[0].setFormatter(formatter)
    logger.filebeat = filebeat  # pyright: ignore
    return logger


@contextlib.contextmanager
def timed_execution(name, slow_log=None):
    """Context manager to log time execution in DEBUG

    - name: prefix used for the log message
    - slow_log: if given a treshold time in seconds. if it runs faster, no log
      is emited
    """
    start = time.time()
    try:
        yield
    finally:
        delta = time.time() - start
        if slow_log is None or delta > slow_log:
            logger.debug(f"[{name}] took {delta} seconds.")
