from sqlalchemy.orm import Session
from sqlalchemy import delete, func
from typing import Optional, List
import logging

from inventory_app.models.product import Product
from inventory_app.schemas.product import ProductCreate, ProductUpdate, ProductStats

logger = logging.getLogger(__name__)


class ProductNotFoundError(Exception):
    """Exception raised when the requested product doesn't exist."""
    pass


class ProductService:
    """
    Service class for Product operations.

    This service handles:
    - Listing products with name search and allow-listed sorting
    - Aggregate inventory statistics
    - Creating, reading, replacing and deleting products

    Each operation is a single statement on the request's session. Storage
    errors are not caught here; they propagate to the router.
    """

    SORTABLE_FIELDS = ("name", "price", "stock", "created_at")

    def __init__(self, db: Session):
        self.db = db

    def list(
        self,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[Product]:
        """
        Get all products matching an optional name search.

        Args:
            search: Case-insensitive substring to match against the name
            sort_by: One of SORTABLE_FIELDS; anything else sorts by
                created_at, newest first
            order: "DESC" for descending; any other value sorts ascending.
                Only applies when sort_by is a sortable field.

        Returns:
            Every matching product, unpaginated
        """
        query = self.db.query(Product)

        if search:
            query = query.filter(Product.name.ilike(f"%{search}%"))

        if sort_by in self.SORTABLE_FIELDS:
            column = getattr(Product, sort_by)
            query = query.order_by(column.desc() if order == "DESC" else column.asc())
        else:
            query = query.order_by(Product.created_at.desc())

        return query.all()

    def stats(self) -> ProductStats:
        """Sum inventory value (price x stock) and stock across all products."""
        total_value, total_stock = self.db.query(
            func.sum(Product.price * Product.stock),
            func.sum(Product.stock),
        ).one()
        return ProductStats(
            total_inventory_value=total_value,
            total_stock=total_stock,
        )

    def get_by_id(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If no product has this ID
        """
        product = self.db.query(Product).filter(Product.id == product_id).first()

        if product is None:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")

        return product

    def create(self, product_data: ProductCreate) -> Product:
        """Insert a product as given and return it with its ID and timestamp."""
        product = Product(**product_data.model_dump())
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)

        logger.info(f"Created Product #{product.id}")
        return product

    def update(self, product_id: int, product_data: ProductUpdate) -> Product:
        """
        Replace every writable field of a product.

        Fields missing from the payload are written as null; there is no
        partial update.

        Raises:
            sqlalchemy.exc.NoResultFound: If no product has this ID
        """
        product = self.db.query(Product).filter(Product.id == product_id).one()

        for field, value in product_data.model_dump().items():
            setattr(product, field, value)

        self.db.commit()
        self.db.refresh(product)

        logger.info(f"Updated Product #{product_id}")
        return product

    def delete(self, product_id: int) -> None:
        """Delete a product by ID. Unknown IDs are a no-op."""
        self.db.execute(delete(Product).where(Product.id == product_id))
        self.db.commit()

        logger.info(f"Deleted Product #{product_id}")
