import logging

from fastapi import FastAPI

from besttrade.api.routes import router as api_router
from besttrade.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Best Trade Calculator API", version="0.1.0")
app.include_router(api_router)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "app_env": settings.app_env,
        "max_days": settings.max_days,
    }
