from dotenv import load_dotenv

load_dotenv()

import logging
import os
import time
from contextlib import asynccontextmanager

# Import third-party libraries
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

HOST = os.getenv("POST_SERVER_HOST", "0.0.0.0")
PORT = int(os.getenv("POST_SERVER_PORT", "8081"), base=10)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure basic logging before importing application modules
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
    force=True,
)

from post_server.api import healthcheck_api, posts_api
from post_server.db.post_db import PostStore

# Configure uvicorn loggers
logging.getLogger("uvicorn.access").setLevel(LOG_LEVEL)
logging.getLogger("uvicorn.error").setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application initialization...")
    app.state.post_store = PostStore()
    logger.info("Post store initialized")
    try:
        # --- Application is running ---
        yield
    finally:
        logger.info(f"Shutting down application with {len(app.state.post_store)} posts in memory")
    logger.info("Application shutdown complete.")


app = FastAPI(lifespan=lifespan)

app.include_router(healthcheck_api.router)
app.include_router(posts_api.router)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
    return response


def run():
    logger.info(f"Server is running at http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
