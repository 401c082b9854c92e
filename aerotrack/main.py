from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from aerotrack.config import settings
import logging

# Configure basic logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Flight tracking, route decoding and award availability",
    version="1.0.0"
)


def allowed_origins(env: str, configured: str) -> list:
    # Any origin outside production
    if env != "production":
        return ["*"]
    return list(dict.fromkeys(o.strip() for o in configured.split(",") if o.strip()))


origins = allowed_origins(settings.env, settings.cors_origins)

logger.info(f"CORS origins: {origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from aerotrack.routers import flights, reference, routes, system
app.include_router(flights.router)
app.include_router(routes.router)
app.include_router(reference.router)
app.include_router(system.router)

@app.get("/health")
def health_check():
    """
    Basic health check endpoint to verify service is running.
    """
    return {"status": "ok", "environment": settings.env}
