import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__, config
from .errors import FracdexError
from .keys import key_between, n_keys_between, validate_order_key
from .schemas import (
    ErrorEnvelope,
    Health,
    KeyBetweenIn,
    KeyOut,
    KeysBatchIn,
    KeysOut,
    ValidateIn,
    ValidateOut,
    Version,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="fracdex API", version=__version__)


# === Helpers ===


def error_response(code: str, message: str, details: dict | None = None) -> JSONResponse:
    body = ErrorEnvelope(
        code=code,
        message=message,
        details=details or {},
        requestId=str(uuid.uuid4()),
    )
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(FracdexError)
async def fracdex_error_handler(request: Request, exc: FracdexError) -> JSONResponse:
    logger.warning("%s %s rejected: %s (%s)", request.method, request.url.path, exc.code, exc.message)
    return error_response(exc.code, exc.message, exc.details)


# === Health & metadata ===


@app.get("/v1/health", response_model=Health)
def health() -> Health:
    return Health()


@app.get("/v1/version", response_model=Version)
def version() -> Version:
    return Version(version=__version__)


# === Key endpoints ===


@app.post("/v1/keys:between", response_model=KeyOut)
def create_key(payload: KeyBetweenIn):
    return KeyOut(key=key_between(payload.before, payload.after))


@app.post("/v1/keys:batch", response_model=KeysOut)
def create_keys(payload: KeysBatchIn):
    if payload.count > config.MAX_BATCH:
        logger.warning("batch of %d keys exceeds limit %d", payload.count, config.MAX_BATCH)
        return error_response(
            "batch_too_large",
            f"count must be at most {config.MAX_BATCH}",
            {"count": payload.count, "limit": config.MAX_BATCH},
        )
    return KeysOut(keys=n_keys_between(payload.before, payload.after, payload.count))


@app.post("/v1/keys:validate", response_model=ValidateOut)
def check_key(payload: ValidateIn):
    try:
        validate_order_key(payload.key)
    except FracdexError as exc:
        return ValidateOut(key=payload.key, valid=False, error=exc.code)
    return ValidateOut(key=payload.key, valid=True)
