from __future__ import annotations

"""
Logging Setup.

The root logger receives a single QueueHandler. The real handlers (stderr
and an optional rotating file) run behind a QueueListener thread, which is
replaced on forced re-configuration and stopped at interpreter exit.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from huffcode.infra.fs import get_user_data_dir
from huffcode.infra.logging.config import _LEVEL_MAP, LoggingConfig
from huffcode.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Attributes stored on the root logger
_CONFIGURED_FLAG_ATTR: str = "_huffcode_configured"
_QUEUE_LISTENER_ATTR: str = "_huffcode_queue_listener"


def get_default_log_path(file_name: str = "huffcode.log") -> str:
    """Return `<user data dir>/logs/<file_name>`."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach huffcode's handlers to the root logger.

    Repeated calls are no-ops unless `force` is set. If the handlers cannot
    be built, a plain stderr handler is installed instead.

    Args:
        cfg: Logging settings.
        force: Rebuild the handlers even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _reset(root)

    try:
        level_int = _LEVEL_MAP.get(str(cfg.level or "").strip().upper(), logging.INFO)
        root.setLevel(level_int)
        handlers = _build_handlers(cfg, level_int)
    except (OSError, ValueError, TypeError) as e:
        root.addHandler(_create_console_handler(
            logging.INFO, logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s")
        ))
        root.warning(f"Logging setup failed ({e}). Switched to emergency console.")
        return root

    if handlers:
        _start_listener(root, handlers)
    return root


def _build_handlers(cfg: LoggingConfig, level_int: int) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if cfg.console:
        handlers.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers.append(fh)
    return handlers


def _start_listener(root: logging.Logger, handlers: List[logging.Handler]) -> None:
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()

    root.addHandler(_tag_handler(QueueHandler(log_queue)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    atexit.register(_stop_listener, listener)


def _reset(root: logging.Logger) -> None:
    """Detach tagged handlers and stop the running listener, if any."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # A listener may already be stopped by a forced re-configuration
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
