"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from bookshelf.app.api.http.app_data import ApplicationDependencies
from bookshelf.app.core.services import (
    AccountService,
    CatalogService,
    JwtGeneratorService,
)


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session scoped to the current request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_jwt_generation_service(request: Request) -> JwtGeneratorService:
    """Get the JWT generation service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.jwt_generation_service


def get_account_service(
    db: Session = Depends(get_db_session),
    jwt_generator: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> AccountService:
    return AccountService(db, jwt_generator)


def get_catalog_service(db: Session = Depends(get_db_session)) -> CatalogService:
    return CatalogService(db)
