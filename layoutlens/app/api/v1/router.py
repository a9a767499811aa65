# layoutlens/app/api/v1/router.py
from fastapi import APIRouter
from .endpoints import health, parse

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(parse.router, prefix="/parse", tags=["parse"])
