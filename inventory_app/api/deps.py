"""
FastAPI dependencies.

Handlers reach shared resources through the AppContext stored on
``app.state`` by the application lifespan.
"""

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from inventory_app.context import AppContext
from inventory_app.services.contact_service import ContactService
from inventory_app.services.product_service import ProductService


def get_context(request: Request) -> AppContext:
    """Return the context created at application startup."""
    return request.app.state.context


def get_db(context: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    """
    Dependency to get database session.
    Yields a database session and closes it after use.
    """
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_contact_service(context: AppContext = Depends(get_context)) -> ContactService:
    return ContactService(context.verifier, context.message_log)
