import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.endpoints.router import api_router
from app.config.settings import settings
from app.exception_handlers import register_error_handlers
from app.utils.db_utils import create_tables

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include API Router
app.include_router(api_router)

@app.on_event("startup")
def startup_event():
    create_tables()

@app.get("/")
def root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}
