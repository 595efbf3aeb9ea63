"""Simple logging abstraction for recipebook."""

import sys
import uuid
from contextvars import ContextVar
from typing import Optional
from loguru import logger as _logger

from .profile import Profile

current_component_context: ContextVar[Optional[str]] = ContextVar('current_component_context', default=None)
command_id_context: ContextVar[Optional[str]] = ContextVar('command_id_context', default=None)
_logger_configured: bool = False


def configure_logging(stderr_level: str = "ERROR", profile: Optional[Profile] = None) -> None:
    """(Re)install the stderr and file sinks."""
    global _logger_configured

    _logger.remove()
    profile = profile or Profile.current()

    # Stderr handler - ERROR and above unless running verbose
    _logger.add(
        sys.stderr,
        level=stderr_level,
        format="<red>{time:HH:mm:ss}</red> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | <level>{message}</level>",
        colorize=True,
    )

    # File handler - all logs (DEBUG and above)
    _logger.add(
        profile.log_file,
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component]} | {extra[command_id]} | {message}",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )

    _logger.configure(patcher=_add_context)
    _logger_configured = True


def get_logger(component: Optional[str] = None):
    """Get a logger instance with optional component context."""
    if component:
        current_component_context.set(component)

    # Configure logger on first use
    if not _logger_configured:
        configure_logging()

    return _logger.bind(component=component) if component else _logger


def _add_context(record):
    """Add context variables to log record."""
    component = record["extra"].get("component") or current_component_context.get()
    command_id = command_id_context.get()

    record["extra"]["component"] = component or "recipebook"
    record["extra"]["command_id"] = command_id or ""


def set_command_id(command_id: Optional[str] = None) -> str:
    """Set the command ID for the current context. Generates one if not provided."""
    if command_id is None:
        command_id = str(uuid.uuid4())[:8]
    command_id_context.set(command_id)
    return command_id


def clear_command_id() -> None:
    """Clear the command ID from the current context."""
    command_id_context.set(None)


logger = get_logger()

__all__ = [
    "logger",
    "get_logger",
    "configure_logging",
    "set_command_id",
    "clear_command_id",
]
