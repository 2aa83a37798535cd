from fastapi import APIRouter


router = APIRouter()


@router.get("/status", summary="Service status check")
async def status_check() -> dict:
    """
    Lightweight liveness probe used by the extension before it offers the popup.
    """
    return {"status": "ok"}
