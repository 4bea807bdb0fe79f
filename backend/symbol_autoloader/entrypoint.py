from __future__ import annotations
import logging
import os
from symbol_autoloader.core.config import settings
from symbol_autoloader.core.logging_config import configure_logging

_log = logging.getLogger("symbol_autoloader.entrypoint")


def main():
    configure_logging(settings.log_level)
    _log.info(
        "starting version=%s base_dir=%s namespace=%s log_level=%s",
        settings.version, settings.base_dir, settings.root_namespace, settings.log_level,
    )
    for label in ('internal_dir', 'test_dir', 'test_mock_dir', 'plugin_dir', 'template_dir'):
        _log.info("%s=%s", label, getattr(settings, label))
    import uvicorn
    from uvicorn.config import LOGGING_CONFIG
    host = os.getenv('AUTOLOAD_HOST', '0.0.0.0')
    port = int(os.getenv('AUTOLOAD_PORT', '4180'))
    _log.info("launching uvicorn on %s:%s", host, port)
    try:
        uvicorn.run(
            'symbol_autoloader.main:app',
            host=host,
            port=port,
            reload=False,
            log_level=settings.log_level.lower(),
            log_config=LOGGING_CONFIG,
        )
    except BaseException:  # catch SystemExit too
        _log.exception("uvicorn crashed")
        raise
    finally:
        _log.info("uvicorn stopped")


if __name__ == '__main__':  # pragma: no cover
    main()
