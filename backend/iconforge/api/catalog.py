"""GET /api/catalog/*: known external icon collections."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from iconforge.catalog.client import KNOWN_COLLECTIONS, resolve_collection
from iconforge.errors import UnknownCollectionError
from iconforge.models.catalog import CollectionInfo

router = APIRouter(prefix="/catalog")


@router.get("/collections", response_model=list[CollectionInfo])
async def collections() -> list[CollectionInfo]:
    return list(KNOWN_COLLECTIONS.values())


@router.get("/collections/{prefix}", response_model=CollectionInfo)
async def collection(prefix: str) -> CollectionInfo:
    try:
        return resolve_collection(prefix)
    except UnknownCollectionError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
