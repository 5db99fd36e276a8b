from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.config.settings import settings

router = APIRouter(prefix="/test", tags=["Health"])

@router.get("/hello", response_class=PlainTextResponse)
def hello():
    return f"{settings.PROJECT_NAME} is running"
