from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Callable

from symbol_autoloader.autoload import executor
from symbol_autoloader.autoload.diagnostics import DiagnosticsChannel
from symbol_autoloader.autoload.models import FaultInfo, LoadResult, LoadStatus

_log = logging.getLogger(__name__)


def guard(
    name: str,
    subject: str,
    path: Path,
    diagnostics: DiagnosticsChannel,
    load: Callable[[Path], LoadResult] = executor.load,
) -> LoadResult:
    """Load extension code at *path*, turning any fault into a result.

    *name* is the symbolic name being resolved; *subject* names the
    extension in the diagnostic message, e.g. ``plugin sample``. Only ``Exception`` subclasses are captured. Interpreter exits and
    keyboard interrupts still propagate.
    """
    try:
        return load(path)
    except Exception as exc:  # noqa: BLE001 - extension code may raise anything
        message = f"Error loading {subject}: {exc}"
        fault = FaultInfo(
            name=name,
            message=message,
            error_type=type(exc).__name__,
            traceback=traceback.format_exc()[-4000:],
        )
        _log.error("%s", message, exc_info=True)
        diagnostics.report(fault)
        return LoadResult(status=LoadStatus.LOADED_WITH_FAULT, path=Path(path), fault=fault)
