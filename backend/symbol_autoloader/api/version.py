from typing import Any, Dict

from fastapi import APIRouter

from symbol_autoloader.core.config import settings

router = APIRouter()


def get_version_payload() -> Dict[str, Any]:
    return {
        'version': settings.version,
        'root_namespace': settings.root_namespace,
    }


@router.get('/version')
async def version():
    return get_version_payload()
