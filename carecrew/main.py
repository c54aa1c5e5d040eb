import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from carecrew.config import settings
from carecrew.db import ensure_indexes, ping, request_collection
from carecrew.errors import LedgerError
from carecrew.logging_config import setup_logging
from carecrew.routers import auth, health, requests, volunteers

logger = logging.getLogger(__name__)

app = FastAPI(title="careCrew API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# routers
app.include_router(health.router)       # GET /
app.include_router(auth.router)         # /jwt, /logOut
app.include_router(volunteers.router)
app.include_router(requests.router)


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(PyMongoError)
async def store_error_handler(request: Request, exc: PyMongoError):
    logger.error("Store fault on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "internal server error"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "internal server error"})


@app.on_event("startup")
def startup() -> None:
    setup_logging(settings.LOG_LEVEL)
    if ping():
        ensure_indexes(request_collection)
