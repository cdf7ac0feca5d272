# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.middleware import RequestIdMiddleware
from app.db import Base, engine
from app.errors import LedgerError
from app.util.log import setup_logging, get_logger
from app import models  # noqa: F401  registers tables

from app.routers import ledger

setup_logging()
logger = get_logger("api")

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield

app = FastAPI(title="Station Ledger API", version="0.1.0", lifespan=lifespan)

@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc, exc_info=exc)
    else:
        logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})

# Middlewares
app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ledger.router)

@app.get("/healthz")
def healthz():
    return {"ok": True}
