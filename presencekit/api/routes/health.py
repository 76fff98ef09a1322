"""Health check endpoint."""

from fastapi import APIRouter

from presencekit.config import VERSION

router = APIRouter()


@router.get("/health")
def health_check() -> dict:
    return {"status": "healthy", "version": VERSION}
