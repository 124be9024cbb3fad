# server.py
# FastAPI backend for Findn AI
# Builds the analysis prompt and relays it to the completion API

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from backend.config import load_config
from backend.errors import AnalysisError, BadRequestError, ConfigurationError
from backend.llm_gateway import call_completion_api
from backend.prompts import build_prompt
from extension.models import Envelope, ProfileData
from health import router as health_router

# -------------------------------------------------------------------
# Configuration
# -------------------------------------------------------------------
APP_VERSION = "1.0.0"

logging.basicConfig(
    level=getattr(logging, load_config().log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("server")

# -------------------------------------------------------------------
# FastAPI app setup
# -------------------------------------------------------------------
app = FastAPI(title="Findn AI Backend", version=APP_VERSION)

# Extension origins are chrome-extension://<id>, so everything is allowed.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        req_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = req_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = req_id
        return response


app.add_middleware(RequestIDMiddleware)
app.include_router(health_router)


@app.on_event("startup")
async def startup_event():
    config = load_config()
    logger.info("Findn AI Backend starting on port %s", config.port)
    if not config.has_api_key:
        logger.warning("OPENAI_API_KEY environment variable is not set! Create a .env file with your OpenAI API key")
    else:
        logger.info("OpenAI API key loaded successfully")


# -------------------------------------------------------------------
# Error envelopes
# -------------------------------------------------------------------
def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    logger.error("Analysis error [%s]: %s", _request_id(request), exc.detail)
    return JSONResponse(status_code=exc.status_code, content=Envelope.fail(exc.message))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Known path with the wrong method is still an unmatched route.
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=Envelope.fail("Endpoint not found"))
    return JSONResponse(status_code=exc.status_code, content=Envelope.fail(str(exc.detail)))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error [%s]", _request_id(request))
    return JSONResponse(status_code=500, content=Envelope.fail("Internal server error"))


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
async def _read_profile(request: Request) -> ProfileData:
    try:
        body = await request.json()
    except ValueError:
        raise BadRequestError("Request body is not valid JSON")
    profile_data = body.get("profileData") if isinstance(body, dict) else None
    if not isinstance(profile_data, dict):
        raise BadRequestError()
    return ProfileData.model_validate(profile_data)


@app.post("/analyze")
async def analyze(request: Request):
    config = load_config()
    if not config.has_api_key:
        logger.error("OPENAI_API_KEY environment variable is not set")
        raise ConfigurationError()

    profile = await _read_profile(request)
    prompt = build_prompt(profile)
    result = await run_in_threadpool(call_completion_api, prompt, config.openai_api_key)
    return Envelope.ok(result.to_wire())


if __name__ == "__main__":
    import uvicorn
    cfg = load_config()
    uvicorn.run("server:app", host=cfg.host, port=cfg.port)
