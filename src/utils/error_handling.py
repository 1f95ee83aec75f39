# src/utils/error_handling.py - Standardized error handling utilities

import logging
import functools
from typing import Any, Callable, Optional, Tuple, Type
from ..domain.exceptions import UseCaseError

logger = logging.getLogger(__name__)


def handle_service_errors(
    operation: str,
    error_type: Type[Exception] = UseCaseError,
    passthrough: Tuple[Type[Exception], ...] = ()
):
    """
    Decorator for standardized service-level error handling.

    Args:
        operation: Description of the operation for error messages
        error_type: Exception type raised in place of unexpected errors
        passthrough: Exception types re-raised unchanged (e.g. validation errors
            the caller must be able to tell apart)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except passthrough:
                raise
            except Exception as e:
                error_msg = f"Failed to {operation}: {str(e)}"
                logger.error(error_msg)
                raise error_type(error_msg, operation, {'cause': type(e).__name__}) from e

        return wrapper
    return decorator


def safe_execute(func: Callable, operation: str) -> Optional[Any]:
    """
    Run func, logging and returning None on failure.

    Useful for inline error handling without decorators, where the caller
    degrades gracefully on a None result.
    """
    try:
        return func()
    except Exception as e:
        logger.error(f"Failed to {operation}: {str(e)}")
        return None
