import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Base, engine, settings
from app.core.exceptions import register_exception_handlers
from app.core.id_generator import IdentifierGenerator
from app import models  # noqa: F401  (registers every table on Base)
from app.api.routers import auth, users, goals, tasks, activities

# =====================================================================
# LOGGING
# =====================================================================

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# =====================================================================
# CREATE APP
# =====================================================================

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    description="Goals, tasks and timed activities API",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# =====================================================================
# ID GENERATOR - one per process
# =====================================================================

app.state.id_generator = IdentifierGenerator(host_prefix=settings.HOST_PREFIX)
logger.info(f"Identifier generator host prefix: {app.state.id_generator.host_prefix}")

# =====================================================================
# DATABASE INITIALIZATION
# =====================================================================

Base.metadata.create_all(bind=engine)

# =====================================================================
# HEALTH CHECK
# =====================================================================


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# =====================================================================
# ROUTES
# =====================================================================

for router in (auth.router, users.router, goals.router, tasks.router, activities.router):
    app.include_router(router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """API root endpoint."""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "auth": f"{settings.API_PREFIX}/auth",
            "users": f"{settings.API_PREFIX}/users",
            "goals": f"{settings.API_PREFIX}/users/{{user_id}}/goals",
        },
    }
