"""External icon catalog records."""

from __future__ import annotations

from pydantic import BaseModel


class CatalogIcon(BaseModel):
    prefix: str
    name: str

    model_config = {"frozen": True}

    @property
    def id(self) -> str:
        return f"{self.prefix}:{self.name}"


class CollectionInfo(BaseModel):
    id: str
    name: str
    license: str
    website: str = ""
    style: str = "mixed"
