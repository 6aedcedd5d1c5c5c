import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobboard.config import settings
from jobboard.database import Base, engine
from jobboard.logging_config import configure_logging
from jobboard import models  # registers all tables on Base.metadata
from jobboard.routes import (
    application_routes,
    auth_routes,
    dashboard_routes,
    job_routes,
    profile_routes,
)

configure_logging()
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Job Board Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {"message": "Job board backend is running!"}


app.include_router(auth_routes.router)
app.include_router(job_routes.router)
app.include_router(application_routes.router)
app.include_router(profile_routes.router)
app.include_router(dashboard_routes.router)

logger.info("Job board backend started")
