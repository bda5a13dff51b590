"""
Title         : command_framework.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/command_framework.py

Description
----------------------------------------------------------------------------
Centralized error handling for Fusion command event handlers.
The @fusion_command decorator keeps exceptions from escaping into the host
event loop and reports them consistently.

Exception Handling:
    - UserCancelledError: Silent exit (not treated as error)
    - Other SpiralPatternError: Alert user with the error message
    - Unexpected exceptions: Logged with stack trace and alerted to the user
"""

from __future__ import annotations

import logging
import traceback
from functools import wraps
from typing import Any, Callable, Optional

from .constants import Strings
from .exceptions import SpiralPatternError, UserCancelledError


logger = logging.getLogger(__name__)

Alert = Callable[[str], Any]


def host_alert(message: str) -> None:
    """Show `message` in the Fusion message box."""
    import adsk.core  # noqa: PLC0415

    app = adsk.core.Application.get()
    if app and app.userInterface:
        app.userInterface.messageBox(message)


def fusion_command(
    alert: Optional[Alert] = None,
    log_start: bool = True,
    abort_transaction: bool = False,
) -> Callable[[Callable[..., Any]], Callable[..., bool]]:
    """Decorator for Fusion event handler bodies with centralized error handling.

    Args:
        alert: Callable used to show messages to the user. Defaults to the
               Fusion message box.
        log_start: Whether to log the handler name before running it.
        abort_transaction: Whether a failure marks the event args (first
               positional argument) with `executeFailed`, so Fusion rolls back
               everything the handler added. The message goes to
               `executeFailedMessage` instead of the alert.

    Returns:
        Decorated function that returns True on success and False on error.

    Example:
        >>> @fusion_command(abort_transaction=True)
        ... def on_execute(args):
        ...     # No try/except needed - decorator handles all errors
        ...     run_pattern(args)
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., bool]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> bool:
            def report(message: str) -> None:
                if abort_transaction and args:
                    args[0].executeFailed = True
                    args[0].executeFailedMessage = message
                else:
                    (alert or host_alert)(message)

            if log_start:
                logger.debug("%s started", func.__name__)

            try:
                func(*args, **kwargs)
                return True  # noqa: TRY300

            except UserCancelledError:
                logger.info("Operation cancelled by user.")
                return True

            except SpiralPatternError as e:
                logger.warning("%s failed: %s", func.__name__, e.to_dict())
                report(Strings.MSG_PLUGIN_ERROR.format(message=e))
                return False

            except Exception:
                logger.exception("Unexpected error in %s", func.__name__)
                report(Strings.MSG_UNEXPECTED_ERROR.format(trace=traceback.format_exc()))
                return False

        return wrapper

    return decorator
