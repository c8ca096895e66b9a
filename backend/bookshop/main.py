# bookshop/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from bookshop.config import settings
from bookshop.core.container import build_services
from bookshop.core.db import init_db, close_db
from bookshop.core.errors import StoreError

from bookshop.api.v1.routers import auth, orders

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS: the storefront may be served from any configured origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Stores and services are wired once; tests may swap this for their own
app.state.services = build_services()

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    # Internal detail stays in the log, the client only sees a bare 500
    logger.exception("[db] %s %s failed", request.method, request.url.path, exc_info=exc)
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

@app.on_event("startup")
async def on_startup():
    await init_db()

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router)
app.include_router(orders.router)

@app.get("/healthz")
def healthz():
    return {"ok": True}

def run():
    """Console entry point: serve the app with uvicorn on the configured host/port."""
    logger.info("[app] %s starting on %s:%s", settings.APP_NAME, settings.host, settings.port)
    uvicorn.run("bookshop.main:app", host=settings.host, port=settings.port)
