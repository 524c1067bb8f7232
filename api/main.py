# api/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .claims      import router as claims_router
from .config      import LOG_LEVEL
from .influencers import router as influencers_router
from .models      import init_db

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: make sure both tables exist
    init_db()
    yield


app = FastAPI(
    title="Health Influencer Tracker",
    description="Model-generated health influencers and claims, stored and served as JSON",
    lifespan=lifespan,
)

# Allow cross‐origin requests from any frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# All influencer and claim calls live under /api
app.include_router(influencers_router, prefix="/api")
app.include_router(claims_router,      prefix="/api")


@app.get("/health")
def health():
    return {"status": "healthy"}
