from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

router = APIRouter()

@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check: answering at all means alive."""
    return {"status": "ok"}

@router.get("/ready")
async def ready(request: Request):
    """Readiness check: 503 outside the app lifespan."""
    if request.app.state.ready:
        return {"status": "ready"}
    return JSONResponse({"status": "not ready"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
