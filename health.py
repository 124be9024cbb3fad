from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    """
    Lightweight health check endpoint.
    The extension's relay probes it to show the backend status.
    """
    return {
        "success": True,
        "message": "Findn AI Backend is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
