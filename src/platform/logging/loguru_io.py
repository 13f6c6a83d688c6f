"""
@Logger.io - call tracing for use cases, entities and adapters.

    @Logger.io
    def reserve(self, request): ...

    @Logger.io(reraise=False)
    def best_effort(): ...

In DEBUG the decorator logs masked arguments and return values. Errors are
always logged once, at the innermost decorated frame they pass through:
expected business errors (CustomBaseError) as a one-line error, anything else
with its traceback.
"""

from functools import wraps
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Optional,
    ParamSpec,
    TypeVar,
    cast,
    overload,
)


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, call_depth_var, custom_logger
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')

_LOGGED_FLAG = '_has_logged'
# frames between loguru and the caller of the decorated function
_WRAPPER_DEPTH = 1
_HELPER_DEPTH = 2


class LoguruIO:
    def __init__(
        self,
        custom_logger: 'LoguruLogger',
        *,
        reraise: bool = True,
        truncate_content: bool = False,
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.call_target = ''

    def _bound(self, depth: int = _WRAPPER_DEPTH) -> 'LoguruLogger':
        return self._custom_logger.bind(
            **{
                ExtraField.CALL_TARGET: self.call_target,
                ExtraField.CHAIN_START_TIME: get_chain_start_time(),
            }
        ).opt(depth=depth)

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            masked: Any = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            masked = type(data)(self.mask_sensitive(item) for item in data)
        else:
            masked = mask_sensitive(data)
        return truncate_content(masked) if self.truncate_content else masked

    def log_exception(self, e: Exception) -> None:
        if getattr(e, _LOGGED_FLAG, False):
            return
        setattr(e, _LOGGED_FLAG, True)

        if isinstance(e, CustomBaseError):
            self._bound(_HELPER_DEPTH).error(f'{type(e).__name__}({e.status_code}): {e.message}')
        else:
            self._bound(_HELPER_DEPTH).exception(f'{type(e).__name__}: {e}')

    def __call__(self, func: _F) -> _F:
        self.call_target = build_call_target_func_path(func)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            call_depth_var.set(call_depth_var.get() + 1)
            try:
                if settings.DEBUG:
                    self._bound().debug(
                        f'args: {self.mask_sensitive(args)}, '
                        f'kwargs: {self.mask_sensitive(kwargs)}'
                    )
                result = func(*args, **kwargs)
                if settings.DEBUG:
                    self._bound().debug(f'return: {self.mask_sensitive(result)}')
                return result
            except Exception as e:
                self.log_exception(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, wrapper)


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(
        func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...
    ) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Optional[Callable[_P, _T]] = None,
        *,
        reraise: bool = True,
        truncate_content: bool = True,
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return decorator(func) if func else decorator
