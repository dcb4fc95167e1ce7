import time

from fastapi import APIRouter, Request

router = APIRouter(tags=["Status"])

@router.get("/health")
def health():
    return {"ok": True, "ts": int(time.time())}

@router.get("/status")
def status(request: Request):
    settings = request.app.state.settings
    return {"ok": True, "app": settings.APP_NAME, "version": settings.VERSION}

@router.get("/version")
def version(request: Request):
    return {"version": request.app.state.settings.VERSION}
