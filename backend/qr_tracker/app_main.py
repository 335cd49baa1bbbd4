import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from qr_tracker import app_config
from qr_tracker.generator_api import router as generator_router
from qr_tracker.logging_config import setup_logging
from qr_tracker.net_utils import get_local_ip
from qr_tracker.scan_history import get_store
from qr_tracker.scanner_api import router as scan_router

logger = logging.getLogger("qr_tracker")


@asynccontextmanager
async def lifespan(app):
    setup_logging()
    # Load the full scan history up front
    store = get_store()
    logger.info("Scan log %s holds %d records", store.path, len(store))
    yield


app = FastAPI(title="QR Campaign Tracker", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(generator_router)
app.include_router(scan_router)

# Static files (form page)
BASE_DIR = Path(__file__).parent
STATIC_DIR = BASE_DIR / "static"

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/")
def root():
    """QR generator form"""
    return FileResponse(STATIC_DIR / "index.html")


def main():
    setup_logging()
    logger.info("Server running:")
    logger.info("-> Local:   http://localhost:%d", app_config.PORT)
    logger.info("-> Network: http://%s:%d", get_local_ip(), app_config.PORT)
    uvicorn.run(app, host=app_config.HOST, port=app_config.PORT)


if __name__ == "__main__":
    main()
