from __future__ import annotations

import logging

_NOISY_LOGGERS: tuple[str, ...] = (
    "uvicorn.access",
    "watchfiles",
    "watchfiles.main",
    "httpx",
)

_FORMAT = '[%(levelname)s] %(name)s: %(message)s'


def _ensure_stream_handler(logger: logging.Logger) -> None:
    handler_exists = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if handler_exists:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)


def resolve_level(level_name: str | None) -> int:
    lvl = getattr(logging, (level_name or 'INFO').strip().upper(), None)
    if not isinstance(lvl, int):
        return logging.INFO
    return lvl


def configure_logging(level_name: str | None = None) -> None:
    """Configure the root logger and quiet chatty third-party loggers."""

    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level_name))
    _ensure_stream_handler(root_logger)

    for noisy_name in _NOISY_LOGGERS:
        logger = logging.getLogger(noisy_name)
        if logger.level < logging.WARNING:
            logger.setLevel(logging.WARNING)
