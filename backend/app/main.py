import logging
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.database import init_db
from app.errors import CaptionStudioError, InvalidInputError
from app.routes import caption_sessions, caption_templates, captions

APP_NAME = "Caption Studio API"

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "info").upper(), logging.INFO),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME)

_cors_origins = [
    "http://localhost:4321",
    "http://127.0.0.1:4321",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    _cors_origins.extend(o.strip() for o in _extra.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(caption_sessions.router, prefix="/api", tags=["caption-sessions"])
app.include_router(captions.router, prefix="/api", tags=["captions"])
app.include_router(caption_templates.router, prefix="/api", tags=["caption-templates"])


@app.exception_handler(CaptionStudioError)
async def caption_studio_error_handler(request: Request, exc: CaptionStudioError):
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.to_dict()})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    error = InvalidInputError("Request validation failed.", details=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=error.status_code, content={"success": False, "error": error.to_dict()})


@app.on_event("startup")
def on_startup():
    init_db()
    logger.info("%s ready with %d routes", APP_NAME, len(app.routes))


@app.get("/api/health")
def health_check():
    return {"app_name": APP_NAME, "status": "healthy"}
