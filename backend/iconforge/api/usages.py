"""POST /api/usages/scan: find references to an icon."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from iconforge.config import Settings
from iconforge.dependencies import get_settings
from iconforge.models.requests import UsageScanRequest
from iconforge.models.responses import UsageScanResponse
from iconforge.usage.scanner import DEFAULT_INCLUDE, scan_directory, scan_text
from iconforge.utils.files import resolve_within

router = APIRouter(prefix="/usages")


@router.post("/scan", response_model=UsageScanResponse)
def scan(req: UsageScanRequest, settings: Settings = Depends(get_settings)) -> UsageScanResponse:
    if req.text is not None:
        matches = scan_text(req.text, req.name)
    elif req.root:
        try:
            root = resolve_within(settings.workspace_root, req.root)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        matches = scan_directory(
            root,
            req.name,
            include=req.include or DEFAULT_INCLUDE,
            exclude=req.exclude,
            max_workers=settings.scan_max_workers,
        )
    else:
        raise HTTPException(status_code=400, detail="Either 'text' or 'root' is required")
    return UsageScanResponse(matches=matches, total=len(matches))
