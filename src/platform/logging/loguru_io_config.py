"""
Loguru sinks and shared state for the Logger.io decorator.

Every record carries the service context, the chain start time of the
outermost @Logger.io call and the active OpenTelemetry trace id, so a single
reservation can be followed across use case, repo and notifier lines.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger as loguru_logger
from opentelemetry import trace


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = {'password', 'card_token'}
MAX_CONTENT_LENGTH = 500
NO_TRACE = '-'

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'
    TRACE_ID = 'trace_id'


def _stamp_trace_id(record: Any) -> None:
    span_context = trace.get_current_span().get_span_context()
    record['extra'][ExtraField.TRACE_ID] = (
        format(span_context.trace_id, '032x') if span_context.is_valid else NO_TRACE
    )


def bind_defaults(base: 'LoguruLogger') -> 'LoguruLogger':
    return base.bind(
        **{
            ExtraField.SERVICE_CONTEXT: get_service_context(),
            ExtraField.CHAIN_START_TIME: '',
            ExtraField.CALL_TARGET: '',
        }
    )


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<m>{{extra[{ExtraField.TRACE_ID}]:.8}}</>',
        f'<c>{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        f'<lk>{{elapsed}} {{extra[{ExtraField.CHAIN_START_TIME}]}}</>',
    )
)


def log_file_path(*, log_dir: str, testing: bool) -> str:
    hour = datetime.now().astimezone().strftime('%Y-%m-%d_%H')
    return os.path.join(log_dir, f'test_{hour}.log' if testing else f'{hour}.log')


def configure_sinks(*, debug: bool, log_dir: str, testing: bool) -> 'LoguruLogger':
    """
    Replace loguru's default handler with the cinema sinks.

    stdout always; an hourly rotated file only when debug is on.
    """
    loguru_logger.remove()
    loguru_logger.configure(patcher=_stamp_trace_id)
    level = 'DEBUG' if debug else 'INFO'

    loguru_logger.add(sys.stdout, format=io_log_format, level=level, enqueue=True)
    if debug:
        loguru_logger.add(
            log_file_path(log_dir=log_dir, testing=testing),
            format=io_log_format,
            level=level,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
        )
    return bind_defaults(loguru_logger)


class InterceptHandler(logging.Handler):
    """Route stdlib logging (third-party libraries) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


_test_log_dir = os.environ.get('TEST_LOG_DIR')
custom_logger = configure_sinks(
    debug=settings.DEBUG,
    log_dir=_test_log_dir or str(LOG_DIR),
    testing=bool(_test_log_dir),
)
logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
