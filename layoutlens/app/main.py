# layoutlens/app/main.py
import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from .api.v1.router import api_router
from .core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Layout and field schema export processor"
)

app.include_router(api_router, prefix=settings.API_V1_STR)


# ============================================
# RUTAS PÚBLICAS
# ============================================

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "app": settings.PROJECT_NAME,
        "version": settings.VERSION
    }


# ============================================
# MANEJADOR DE ERRORES
# ============================================

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Maneja todos los HTTPException de forma centralizada."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )
