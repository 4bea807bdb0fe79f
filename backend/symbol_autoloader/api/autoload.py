from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from symbol_autoloader.autoload.models import NamespaceCategory
from symbol_autoloader.autoload.plugin_names import parse as parse_plugin_name, plugin_path
from symbol_autoloader.autoload.resolver import Autoloader, get_autoloader
from symbol_autoloader.core.errors import MissingHostFile
from symbol_autoloader.schemas.resolution import (
    DiagnosticsResponse,
    FaultPayload,
    RegistryResponse,
    ResolveRequest,
    ResolveResponse,
    TranslateResponse,
)

router = APIRouter(prefix='/autoload', tags=['autoload'])
logger = logging.getLogger(__name__)


@router.post('/resolve', response_model=ResolveResponse)
def resolve_symbol(payload: ResolveRequest, loader: Autoloader = Depends(get_autoloader)):
    try:
        outcome = loader.resolve_outcome(payload.name)
    except MissingHostFile as exc:
        logger.error("host file missing while resolving %s: %s", payload.name, exc)
        raise HTTPException(
            status_code=500,
            detail={'code': 'HOST_FILE_MISSING', 'name': exc.name, 'path': str(exc.path)},
        )
    return ResolveResponse.from_outcome(outcome)


@router.get('/translate', response_model=TranslateResponse)
def translate_symbol(name: str = Query(..., min_length=1), loader: Autoloader = Depends(get_autoloader)):
    """Show where a name would be looked up, without loading anything."""
    hit = loader.translator.translate(name)
    if hit is not None:
        path, category = hit
        return TranslateResponse(name=name, category=category, path=str(path))
    descriptor = parse_plugin_name(name)
    if descriptor is not None:
        path = plugin_path(descriptor, loader.settings.plugin_dir, loader.settings.source_suffix)
        return TranslateResponse(name=name, category=NamespaceCategory.PLUGIN, path=str(path))
    raise HTTPException(status_code=404, detail={'code': 'NO_RULE', 'name': name})


@router.get('/registry', response_model=RegistryResponse)
def list_registry(loader: Autoloader = Depends(get_autoloader)):
    return RegistryResponse(entries={name: str(path) for name, path in loader.registry.table().items()})


@router.get('/diagnostics', response_model=DiagnosticsResponse)
def list_diagnostics(loader: Autoloader = Depends(get_autoloader)):
    return DiagnosticsResponse(faults=[FaultPayload.from_fault(f) for f in loader.diagnostics.recent()])


@router.delete('/diagnostics')
def clear_diagnostics(loader: Autoloader = Depends(get_autoloader)):
    loader.diagnostics.clear()
    return {'status': 'cleared'}
