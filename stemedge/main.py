from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from stemedge.core.config import get_settings
from stemedge.api.routes import auth, lessons, quiz, simulations, tutor, websocket
from stemedge.services.lesson_views import get_view_registry
import logging

settings = get_settings()

# ---- Logging setup ----
logging.basicConfig(
    level=logging.INFO,  # Set to DEBUG if you want more details
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Stop every simulation timer still owned by an open view
    get_view_registry().close_all()
    logger.info("All lesson views closed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(lessons.router, prefix=f"{settings.API_V1_STR}", tags=["lessons"])
app.include_router(simulations.router, prefix=f"{settings.API_V1_STR}", tags=["simulations"])
app.include_router(quiz.router, prefix=f"{settings.API_V1_STR}", tags=["quiz"])
app.include_router(tutor.router, prefix=f"{settings.API_V1_STR}", tags=["tutor"])
app.include_router(auth.router, prefix=f"{settings.API_V1_STR}", tags=["auth"])
app.include_router(websocket.router, prefix=f"{settings.API_V1_STR}", tags=["websocket"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "StemEdge Lesson API",
        "lessons": sorted(lessons.LESSONS),
        "docs": "/docs"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
