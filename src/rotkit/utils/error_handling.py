import logging
import sys
import types
from functools import wraps
from typing import Any, Callable, List, Optional, Type, TypeVar, cast

from rotkit.utils.exceptions import RotkitError
from rotkit.utils.logging import get_logger, log_exception

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(
    logger: Optional[logging.Logger] = None,
    exit_on_error: bool = False,
    exit_code: int = 1,
    show_traceback: bool = False,
    expected_exceptions: Optional[List[Type[Exception]]] = None,
) -> Callable[[F], F]:
    """
    Decorator to handle exceptions in a consistent way.

    Args:
        logger: The logger to use for error messages
        exit_on_error: Whether to exit the program on error
        exit_code: The exit code to use when exiting
        show_traceback: Whether to show the full traceback for expected errors
        expected_exceptions: List of exception types that should be handled
                            without treating them as unexpected errors

    Returns:
        A decorator function
    """
    expected = tuple(expected_exceptions or [RotkitError])

    def decorator(func: F) -> F:
        log = logger if logger is not None else get_logger(func.__module__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except expected as e:
                if show_traceback:
                    log_exception(log, f"Error in {func.__name__}: {e}", e)
                else:
                    log.error("Error in %s: %s", func.__name__, e)
            except Exception as e:
                log_exception(log, f"Unexpected error in {func.__name__}: {e}", e, logging.CRITICAL)

            if exit_on_error:
                sys.exit(exit_code)
            return None

        return cast(F, wrapper)

    return decorator


def capture_exceptions() -> None:
    """Set up global exception handling to log uncaught exceptions."""
    logger = get_logger(__name__)

    def exception_handler(
        exc_type: Type[BaseException],
        exc_value: BaseException,
        exc_traceback: Optional[types.TracebackType],
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        log_exception(logger, "Uncaught exception", exc_value, logging.CRITICAL)

    sys.excepthook = exception_handler
