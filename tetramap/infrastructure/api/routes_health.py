"""Health check endpoint."""

from fastapi import APIRouter, Depends

from tetramap.infrastructure.api.dependencies import Container, get_container

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(container: Container = Depends(get_container)):
    """Report configured providers. Does not call external services."""
    s = container.settings
    return {
        "status": "ok",
        "geocoder": s.geocoder_provider,
        "storage": s.storage_backend,
        "service": "Tetramap location directory",
    }
