# uvicorn - server to post and run
# uvicorn api.app:app --reload
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routers.gloss import router as gloss_router
from common.config import Settings
from common.logging import setup_logging
from core.versions import version_info
from pipelines.gloss_pipeline import load_reference_data


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Reference data is loaded once; a missing dictionary aborts startup
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    logging.info(f"Starting gloss service {version_info()}")
    app.state.settings = settings
    app.state.reference_data = load_reference_data(settings)
    yield


app = FastAPI(lifespan=lifespan)

app.include_router(gloss_router)
