"""
OAuth2 Client Application - FastAPI Version
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
from fastapi.staticfiles import StaticFiles
import uvicorn

# Import configuration and logging
from core.config import config, logger, SECRET_KEY, SESSION_COOKIE, CORS_ORIGINS, APP_NAME, STATIC_DIR, HOST, PORT

# Import routers
from web.routes import health_router, pages_router, oauth_router


# Lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{APP_NAME} starting...")
    yield
    # Shutdown
    logger.info(f"{APP_NAME} shutting down...")

# Create FastAPI app
app = FastAPI(
    title=APP_NAME,
    description="Web client that hands visitors to an OAuth2 identity provider",
    version="1.0.0",
    docs_url="/docs" if config.enable_docs else None,
    redoc_url="/redoc" if config.enable_docs else None,
    lifespan=lifespan
)

# Add Session Middleware
app.add_middleware(
    SessionMiddleware,
    secret_key=SECRET_KEY,
    session_cookie=SESSION_COOKIE,
    https_only=config.is_production,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount static files
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers
app.include_router(health_router, tags=["health"])
app.include_router(oauth_router, tags=["oauth"])
app.include_router(pages_router, include_in_schema=False)


if __name__ == "__main__":
    uvicorn.run("app:app", host=HOST, port=PORT, reload=config.is_development)
