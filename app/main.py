from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from config import DEBUG, APP_HOST, APP_PORT, PROVISION_ON_STARTUP
from database.init import Base, SessionLocal, engine
from database.provisioner import SchemaProvisioner
from routes import (
    admin_routes,
    occupant_routes,
    payment_routes,
    room_routes,
    staff_routes,
)
from services.admin_service import AdminService
from utils.exceptions import (
    AuthenticationError,
    DuplicateError,
    InvalidTenantIdError,
    NotFoundError,
    ProvisioningError,
    SchemaMissingError,
)
from utils.logger import get_logger, setup_logging
from responses.error import (
    bad_request_error,
    conflict_error,
    internal_server_error,
    not_found_error,
    provisioning_error,
    schema_missing_error,
    unauthorized_error,
)

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    Base.metadata.create_all(bind=engine)
    if PROVISION_ON_STARTUP:
        db = SessionLocal()
        try:
            AdminService(SchemaProvisioner(engine)).provision_existing_admins(db)
        finally:
            SessionLocal.remove()
    logger.info("PG Manager API started")
    yield


app = FastAPI(title="PG Manager API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
def handle_not_found(request: Request, exc: NotFoundError):
    return not_found_error(str(exc))


@app.exception_handler(DuplicateError)
def handle_duplicate(request: Request, exc: DuplicateError):
    return conflict_error(str(exc))


@app.exception_handler(ProvisioningError)
def handle_provisioning(request: Request, exc: ProvisioningError):
    logger.error(str(exc), extra={"tenant_id": exc.tenant_id})
    return provisioning_error(str(exc), exc.missing)


@app.exception_handler(SchemaMissingError)
def handle_schema_missing(request: Request, exc: SchemaMissingError):
    return schema_missing_error(str(exc), exc.missing)


@app.exception_handler(InvalidTenantIdError)
def handle_invalid_tenant(request: Request, exc: InvalidTenantIdError):
    return bad_request_error(str(exc))


@app.exception_handler(AuthenticationError)
def handle_authentication(request: Request, exc: AuthenticationError):
    return unauthorized_error(str(exc))


@app.exception_handler(SQLAlchemyError)
def handle_database_error(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return internal_server_error("A database error occurred")


app.include_router(admin_routes.router)
app.include_router(room_routes.router)
app.include_router(occupant_routes.router)
app.include_router(staff_routes.router)
app.include_router(payment_routes.router)


@app.get("/")
def read_root():
    return {"name": "PG Manager API", "version": "1.0.0"}


if __name__ == "__main__":
    uvicorn.run("main:app", host=APP_HOST, port=APP_PORT, reload=DEBUG)
