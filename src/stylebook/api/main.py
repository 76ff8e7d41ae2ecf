import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from stylebook import __version__
from stylebook.api.dependencies import get_settings
from stylebook.api.routers import guides


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    yield


app = FastAPI(title="stylebook", version=__version__, lifespan=lifespan)

app.include_router(guides.router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "ok"}
