"""
School Records Reporting API

Main FastAPI application for the school records system.
Serves the grade reports: flat grade listings, subject-grouped reports
and teacher gradebooks.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import init_db
from api import grades_router, teachers_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# --------------- Lifespan ---------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan handler – initialise DB on startup."""
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized.")
    yield


# --------------- FastAPI app ---------------

app = FastAPI(
    title="School Records Reporting API",
    description="""
Reporting API for the school records system.

## Reports

### Subject-grouped grades
- `GET /grades?groupBy=subject` with optional `class` and `trimester` filters
- Subjects ordered by name, grades ordered by student last name
- Each subject carries its weighted average

### Teacher gradebook
- `GET /teachers/{teacher_id}/students-grades`
- Every student in the teacher's classes, with the grades that teacher issued
- Students without grades are listed with an empty grade list

### Unresolved references
A grade pointing at a deleted subject, teacher, student, class or trimester
is still reported; the missing reference is marked `"status": "unresolved"`.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "error_type": type(exc).__name__}
    )


# Include routers
app.include_router(grades_router)
app.include_router(teachers_router)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API health check."""
    return {
        "status": "online",
        "service": "School Records Reporting API",
        "version": "1.0.0"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
