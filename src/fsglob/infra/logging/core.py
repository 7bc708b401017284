from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
pushed through a QueueHandler and written by a QueueListener thread, so
slow file I/O never delays directory listing or match output.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from fsglob.infra.logging.config import (
    CONSOLE_FORMAT,
    DATE_FORMAT,
    FALLBACK_FORMAT,
    FILE_FORMAT,
    LEVEL_MAP,
    LoggingConfig,
)
from fsglob.infra.logging.handlers import (
    create_console_handler,
    create_rotating_file_handler,
    is_our_handler,
    tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
CONFIGURED_FLAG_ATTR: str = "_fsglob_configured"
QUEUE_LISTENER_ATTR: str = "_fsglob_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using non-blocking queue-based I/O.

    Repeated calls are no-ops unless 'force' is set, in which case the
    handlers previously installed by fsglob are replaced. Handlers owned by
    other code are left alone. If the queue infrastructure cannot be built,
    a plain stderr handler is attached instead so diagnostics are not lost.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, re-initialize handlers even if already configured.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    if getattr(root, CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        return _install_queue_handlers(root, cfg)
    except Exception as e:
        return _install_emergency_console(root, e)


def shutdown_logging() -> None:
    """
    Detach fsglob handlers from the root logger and stop the queue listener.

    Pending records are flushed before the listener thread exits.
    """
    root = logging.getLogger()

    listener = getattr(root, QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        setattr(root, QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_our_handler(h):
            root.removeHandler(h)
            h.close()

    setattr(root, CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """Acquire a named logger (usually __name__)."""
    return logging.getLogger(name)


def parse_level(level: Optional[str]) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop_listener(listener: QueueListener) -> None:
    """
    Stop a QueueListener and close the handlers it owns.

    Stopping twice (explicit shutdown followed by atexit) is harmless.
    """
    if getattr(listener, "_thread", None) is None:
        return
    listener.stop()
    for h in listener.handlers:
        try:
            h.close()
        except OSError:
            sys.stderr.write(f"WARNING: Failed to close log handler {h!r}\n")


def _install_queue_handlers(root: logging.Logger, cfg: LoggingConfig) -> logging.Logger:
    """Attach a QueueHandler fed to console/file handlers by a QueueListener."""
    level_int = parse_level(cfg.level)
    root.setLevel(level_int)

    shutdown_logging()

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.append(
            create_console_handler(level_int, logging.Formatter(CONSOLE_FORMAT))
        )

    if cfg.log_file:
        fh = create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = tag_handler(QueueHandler(log_queue))

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)
    setattr(root, QUEUE_LISTENER_ATTR, listener)
    setattr(root, CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_stop_listener, listener)

    return root


def _install_emergency_console(root: logging.Logger, error: Exception) -> logging.Logger:
    """
    Replace fsglob handlers with a single direct stderr handler.

    Used when the queue infrastructure fails; the root is not flagged as
    configured so a later call can retry the full setup.
    """
    shutdown_logging()
    root.setLevel(logging.INFO)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(FALLBACK_FORMAT))
    root.addHandler(tag_handler(sh))

    root.warning(f"Logging infrastructure failed ({error}). Switched to emergency console.")
    return root
