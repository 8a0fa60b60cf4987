"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from iconforge.api import animation, catalog, components, css, health, sprite, svg, usages

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(svg.router)
api_router.include_router(animation.router)
api_router.include_router(catalog.router)
api_router.include_router(components.router)
api_router.include_router(css.router)
api_router.include_router(sprite.router)
api_router.include_router(usages.router)
