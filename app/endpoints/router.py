from fastapi import APIRouter
from app.endpoints.v1 import (
    health_api,
    members_api,
    projects_api,
    teams_api
)

api_router = APIRouter(prefix="/api")

api_router.include_router(teams_api.router)
api_router.include_router(members_api.router)
api_router.include_router(projects_api.router)
api_router.include_router(health_api.router)
