# Berry backend entrypoint: student opportunity discovery API.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import admin_organizations
from backend.app.api import email_verification
from backend.app.api import login
from backend.app.api import opportunities
from backend.app.api import organizations
from backend.app.api import register
from backend.app.api import students
from backend.app.core.dev_seed import ensure_default_dev_admin
from backend.app.core.errors import register_error_handlers
from backend.app.core.settings import get_settings
from backend.app.core.setup_logging import add_request_logging, setup_logging
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

settings = get_settings()
setup_logging()

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
add_request_logging(app)
register_error_handlers(app)

app.include_router(register.router)
app.include_router(login.router)
app.include_router(email_verification.router)
app.include_router(organizations.router)
app.include_router(admin_organizations.router)
app.include_router(opportunities.router)
app.include_router(students.router)


@app.get("/")
def read_root():
    return {"app": "Berry backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def prepare_database():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_dev_admin(db)
    finally:
        db.close()
