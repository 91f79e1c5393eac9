"""
Error handling decorators.

The preference layer never lets a storage problem reach its caller; these
decorators keep that policy in one place and make sure every swallowed error is
logged first.
"""

import functools
import traceback
from typing import Any, Callable, Optional, Tuple, Type

import structlog

logger = structlog.get_logger(__name__)


def log_errors(
    level: str = "error",
    include_traceback: bool = False,
    reraise: bool = True,
    default: Any = None,
    catch: Tuple[Type[BaseException], ...] = (Exception,),
    operation_name: Optional[str] = None,
):
    """
    Decorator to log errors with context.

    Args:
        level: Log level (debug, info, warning, error, critical)
        include_traceback: Include full traceback in logs
        reraise: Whether to re-raise the exception after logging
        default: Value returned when the error is swallowed
        catch: Exception types handled by the decorator
        operation_name: Custom operation name for logging
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            op_name = operation_name or f"{func.__module__}.{func.__name__}"

            try:
                return func(*args, **kwargs)
            except catch as e:
                log_method = getattr(logger, level.lower(), logger.error)

                log_data = {
                    "operation": op_name,
                    "error_type": type(e).__name__,
                    "error": str(e),
                }

                if include_traceback:
                    log_data["traceback"] = traceback.format_exc()

                log_method("Error in operation", **log_data)

                if reraise:
                    raise
                return default

        return wrapper

    return decorator


def with_fallback(fallback_func: Callable, log_errors: bool = True):
    """
    Decorator to provide fallback functionality.

    Args:
        fallback_func: Function to call (with the same arguments) if the
            primary function fails
        log_errors: Whether to log errors
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if log_errors:
                    logger.warning(
                        "Primary function failed, using fallback",
                        function=func.__name__,
                        error=str(e)
                    )

                return fallback_func(*args, **kwargs)

        return wrapper

    return decorator
