# api/main.py
from dotenv import load_dotenv
import os

env = os.getenv("APP_ENV", "local")
if env == "local":
    load_dotenv(".env.local")
else:
    load_dotenv(".env")

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from sqlalchemy.exc import DataError, OperationalError
from database.db import init_db
from fastapi.middleware.cors import CORSMiddleware

from services.errors import ServiceError, TransientError, ValidationError
from api.routers import (
    health,
    auth,
    event,
    article,
    review,
)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)
logger.info(f"Loaded environment: {env}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting OPR Backend, initializing DB")
    try:
        init_db()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise
    yield
    logger.info("Shutting down OPR Backend")


app = FastAPI(
    title="OPR - Online Paper Review API",
    version="1.0.0",
    description="Article submission and peer review backend.",
    lifespan=lifespan
)

# CORS Configuration
origins = []
if env == "local":
    origins = ["http://localhost:3000"]
else:
    origins_str = os.getenv("ALLOWED_ORIGINS", "")
    origins = [origin.strip() for origin in origins_str.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=int(exc.status_code), content={"detail": exc.message})


@app.exception_handler(OperationalError)
async def database_unavailable_handler(request: Request, exc: OperationalError):
    logger.error(f"Database unavailable during {request.method} {request.url.path}: {exc}")
    error = TransientError("Database temporarily unavailable, try again later")
    return JSONResponse(status_code=int(error.status_code), content={"detail": error.message})


@app.exception_handler(DataError)
async def invalid_data_handler(request: Request, exc: DataError):
    logger.warning(f"Database rejected data during {request.method} {request.url.path}: {exc.orig}")
    error = ValidationError("Request data does not fit the stored column")
    return JSONResponse(status_code=int(error.status_code), content={"detail": error.message})


app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, tags=["Authentication"])
app.include_router(event.router, tags=["Events"])
app.include_router(article.router, tags=["Articles"])
app.include_router(review.router, tags=["Reviews"])


@app.get("/")
async def root():
    return {"message": "OPR Backend Running"}


def run():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3333")))


if __name__ == "__main__":
    run()
