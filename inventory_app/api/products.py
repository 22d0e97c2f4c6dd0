from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
import logging

from inventory_app.api.deps import get_product_service
from inventory_app.services.product_service import ProductService, ProductNotFoundError
from inventory_app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductStats
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def storage_error(exc: SQLAlchemyError) -> HTTPException:
    """Report a database failure to the client with its raw message."""
    logger.error(f"Database error: {exc}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc)
    )


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List products",
    description="Get every product, optionally filtered by name and sorted."
)
@router.get("/", response_model=List[ProductResponse], include_in_schema=False)
def list_products(
    search: Optional[str] = Query(None, description="Case-insensitive name search"),
    sort_by: Optional[str] = Query(
        None,
        alias="sortBy",
        description="One of name, price, stock, created_at"
    ),
    order: str = Query("ASC", description="ASC or DESC"),
    service: ProductService = Depends(get_product_service)
):
    """
    List products.

    - **search**: match products whose name contains this text
    - **sortBy**: sort field; unknown values fall back to newest first
    - **order**: ASC (default) or DESC
    """
    try:
        return service.list(search, sort_by, order)
    except SQLAlchemyError as e:
        raise storage_error(e)


@router.get(
    "/stats",
    response_model=ProductStats,
    summary="Inventory statistics",
    description="Total inventory value (price x stock) and total stock."
)
@router.get("/stats/", response_model=ProductStats, include_in_schema=False)
def product_stats(service: ProductService = Depends(get_product_service)):
    try:
        return service.stats()
    except SQLAlchemyError as e:
        raise storage_error(e)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID"
)
@router.get("/{product_id}/", response_model=ProductResponse, include_in_schema=False)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID. Any lookup failure is reported as not found."""
    try:
        return service.get_by_id(product_id)
    except (ProductNotFoundError, SQLAlchemyError) as e:
        logger.info(f"Product lookup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product"
)
@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**, **description**, **price**, **stock**, **category**

    Fields are stored as given; the database decides what is acceptable.
    """
    try:
        return service.create(product_data)
    except SQLAlchemyError as e:
        raise storage_error(e)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Replace a product",
    description="Overwrite every field of a product. Omitted fields become null."
)
@router.put("/{product_id}/", response_model=ProductResponse, include_in_schema=False)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    try:
        return service.update(product_id, product_data)
    except SQLAlchemyError as e:
        raise storage_error(e)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    description="Delete a product by ID. Deleting an unknown ID succeeds."
)
@router.delete(
    "/{product_id}/",
    status_code=status.HTTP_204_NO_CONTENT,
    include_in_schema=False
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    try:
        service.delete(product_id)
    except SQLAlchemyError as e:
        raise storage_error(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
