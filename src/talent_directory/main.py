"""FastAPI application exposing the talent directory."""

from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
import structlog

from talent_directory.api.dashboard import router as dashboard_router
from talent_directory.api.public import router as public_router
from talent_directory.api.subscribers import router as subscribers_router
from talent_directory.api.talent_pools import router as talent_pools_router
from talent_directory.api.tenants import router as tenants_router
from talent_directory.auth.dependencies import get_store
from talent_directory.auth.utils import create_access_token
from talent_directory.core.config import settings
from talent_directory.core.database import db_manager
from talent_directory.core.errors import DirectoryError, ErrorCategory
from talent_directory.core.logging import configure_logging
from talent_directory.kv.base import KeyValueStore
from talent_directory.kv.sql import SqlKeyValueStore
from talent_directory.schemas.tenant import AuthResponse, LoginRequest, TenantCreate, TenantResponse
from talent_directory.services.seed_service import SeedService
from talent_directory.services.tenant_service import TenantService

logger = structlog.get_logger(__name__)

ERROR_STATUS = {
    ErrorCategory.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.DUPLICATE: status.HTTP_409_CONFLICT,
    ErrorCategory.AUTHENTICATION: status.HTTP_401_UNAUTHORIZED,
    ErrorCategory.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    db_manager.initialize()
    if settings.seed_demo_data:
        with db_manager.get_session() as db:
            SeedService().seed_demo_data(SqlKeyValueStore(db))
    logger.info("Talent directory started", environment=settings.environment)
    yield
    db_manager.close()


app = FastAPI(
    title="Talent Directory API",
    description="Multi-tenant talent pipeline directory",
    version="0.1.0",
    lifespan=lifespan
)

app.include_router(tenants_router)
app.include_router(public_router)
app.include_router(subscribers_router)
app.include_router(talent_pools_router)
app.include_router(dashboard_router)


@app.exception_handler(DirectoryError)
async def directory_error_handler(request: Request, exc: DirectoryError):
    """Translate directory errors into JSON responses."""
    status_code = ERROR_STATUS.get(exc.category, status.HTTP_400_BAD_REQUEST)
    logger.info(
        "Directory error",
        path=request.url.path,
        category=exc.category.value,
        status_code=status_code,
        error=exc.message
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "error": exc.to_dict()})


def _auth_response(message: str, tenant: TenantResponse) -> AuthResponse:
    expires = timedelta(minutes=settings.access_token_expire_minutes)
    token = create_access_token({"sub": tenant.id, "email": tenant.email}, expires_delta=expires)
    return AuthResponse(
        message=message,
        tenant=tenant,
        access_token=token,
        expires_in=int(expires.total_seconds())
    )


@app.get("/health")
async def health_check():
    """Health check endpoint reporting database connectivity."""
    database_ok = db_manager.health_check()
    return {
        "status": "ok" if database_ok else "degraded",
        "service": "talent-directory",
        "database": "connected" if database_ok else "unavailable"
    }


@app.post("/auth/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(registration: TenantCreate, store: KeyValueStore = Depends(get_store)):
    """Register a company account and return an access token."""
    tenant = TenantService().create_tenant(store, registration)
    return _auth_response("User registered successfully", tenant)


@app.post("/auth/login", response_model=AuthResponse)
async def login(credentials: LoginRequest, store: KeyValueStore = Depends(get_store)):
    """Authenticate a tenant and return an access token."""
    tenant = TenantService().authenticate(store, credentials.email, credentials.password)
    return _auth_response("Login successful", tenant)


@app.post("/demo/initialize")
async def initialize_demo_data(store: KeyValueStore = Depends(get_store)):
    """Seed the demo tenant's records if that has not happened yet."""
    initialized = SeedService().seed_demo_data(store)
    return {"message": "Demo data initialized successfully", "initialized": initialized}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "talent_directory.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development"
    )
