#!/usr/bin/env python
"""
mywallet/main.py

Sets up the FastAPI application for MyWallet, a personal deposit/withdrawal
ledger.

Key Roles:
 - Configures CORS for frontend integration (origins from the environment)
 - Creates database tables at startup
 - Includes the 'user' (sign-up / sign-in) and 'ledger' (balance) routers
 - Turns unexpected errors into a bare 500, logging the details server-side
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mywallet.database import create_tables
from mywallet.routers import user, ledger


logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------
raw_origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
ALLOWED_ORIGINS = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]


# ---------------------------------------------------------
# Database: Create Tables at Startup
# ---------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Ensures tables are created (if not already) before the first request.
    This won't delete or overwrite existing data; it's idempotent.
    """
    create_tables()
    yield


# ---------------------------------------------------------
# Initialize the FastAPI application
# ---------------------------------------------------------
app = FastAPI(
    title="MyWallet API",
    description=(
        "Personal wallet backend: sign-up, bearer-token sign-in and an "
        "append-only deposit/withdrawal ledger per user."
    ),
    version="1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------
# Unexpected errors -> 500 with no detail leaked
# ---------------------------------------------------------
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ---------------------------------------------------------
# Routers (User, Ledger)
# ---------------------------------------------------------
app.include_router(user.router)
app.include_router(ledger.router)


# ---------------------------------------------------------
# Root Route
# ---------------------------------------------------------
@app.get("/")
def read_root():
    """
    Basic root path to confirm the API is running.
    """
    return {"message": "MyWallet API is running"}


# ---------------------------------------------------------
# Local Testing
# ---------------------------------------------------------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("mywallet.main:app", host="0.0.0.0", port=5000)
