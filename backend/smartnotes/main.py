import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from smartnotes.api import auth, notes
from smartnotes.config import log_level
from smartnotes.errors import AppError

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

app = FastAPI(title="Smart Notes API")
app.include_router(auth.router)
app.include_router(notes.router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    # every AppError is caused by the request itself: 4xx, logged at INFO
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.to_dict()},
    )


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/hello")
def hello():
    return {"message": "Hello from Smart Notes!"}
