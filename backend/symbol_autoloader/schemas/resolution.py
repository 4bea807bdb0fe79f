from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from symbol_autoloader.autoload.models import FaultInfo, LoadStatus, NamespaceCategory, ResolutionOutcome, Route


class ResolveRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Symbolic name to resolve")


class FaultPayload(BaseModel):
    name: str
    message: str
    error_type: str
    traceback: str = ''
    occurred_at: datetime

    @classmethod
    def from_fault(cls, fault: FaultInfo) -> 'FaultPayload':
        return cls(
            name=fault.name,
            message=fault.message,
            error_type=fault.error_type,
            traceback=fault.traceback,
            occurred_at=fault.occurred_at,
        )


class ResolveResponse(BaseModel):
    name: str
    handled: bool = Field(..., description="True when a file was found and processing attempted")
    route: Optional[Route] = None
    category: Optional[NamespaceCategory] = None
    status: Optional[LoadStatus] = None
    path: Optional[str] = None
    fault: Optional[FaultPayload] = None

    @classmethod
    def from_outcome(cls, outcome: ResolutionOutcome) -> 'ResolveResponse':
        result = outcome.result
        return cls(
            name=outcome.name,
            handled=outcome.handled,
            route=outcome.route,
            category=outcome.category,
            status=outcome.status,
            path=str(result.path) if result and result.path is not None else None,
            fault=FaultPayload.from_fault(outcome.fault) if outcome.fault else None,
        )


class TranslateResponse(BaseModel):
    name: str
    category: NamespaceCategory
    path: str


class RegistryResponse(BaseModel):
    entries: Dict[str, str]


class DiagnosticsResponse(BaseModel):
    faults: List[FaultPayload]
