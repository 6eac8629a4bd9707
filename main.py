"""
Main application entry point for the Contacts API.

This module configures logging, creates the database tables, initializes
the FastAPI application with CORS and JSON error handlers, and includes
the routers for users, contacts and addresses.

Modules:
- FastAPI: Web framework
- CORSMiddleware: Middleware for handling CORS
- app.logging: Root logger configuration
- app.errors: Exception handlers rendering ``{"errors": ...}`` bodies
- app.database: Table creation and sessions
- app.users / app.contacts / app.addresses: API routers
- app.core: Application settings
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import contacts, addresses, users
from app.database import init_db
from app.core import get_settings
from app.errors import register_exception_handlers
from app.logging import configure_logging, get_logger

settings = get_settings()
configure_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

# Create tables (for development only)
if settings.CREATE_TABLES:
    init_db()

# Initialize FastAPI application
app = FastAPI(title="Contacts API")

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers for application areas
app.include_router(users.router)
app.include_router(contacts.router)
app.include_router(addresses.router)

logger.info("Contacts API ready with %d routes", len(app.routes))


@app.get("/")
def root():
    """
    Root endpoint for the API.

    Returns a simple JSON message directing users to the Swagger UI.

    Returns:
        dict: JSON message with information about the API
    """
    return {"msg": "Contacts API. Visit /docs for Swagger UI"}
