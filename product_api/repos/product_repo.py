# product_api/repos/product_repo.py
from contextlib import contextmanager

from sqlalchemy import delete, select, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session

from product_api.data.models.product import ProductModel
from product_api.domain.errors import StorageError
from product_api.utils.logging import get_logger

logger = get_logger(__name__)


class ProductRepo:
    """
    Każda metoda wykonuje dokładnie jedno zapytanie SQL.
    Błędy SQLAlchemy są zamieniane na StorageError z oryginalnym komunikatem drivera.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage_errors(self):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            message = str(e.orig) if isinstance(e, DBAPIError) and e.orig is not None else str(e)
            logger.error(f"Storage error: {message}")
            raise StorageError(message) from e

    def list_products(self) -> list[ProductModel]:
        with self._storage_errors():
            return list(self.db.execute(select(ProductModel)).scalars().all())

    def get_product(self, product_id: int) -> ProductModel | None:
        with self._storage_errors():
            return self.db.get(ProductModel, product_id)

    def create_product(self, product: ProductModel) -> ProductModel:
        with self._storage_errors():
            self.db.add(product)
            self.db.commit()
        return product

    def update_product(self, product_id: int, name: str, price: float, description: str) -> int:
        with self._storage_errors():
            result = self.db.execute(
                update(ProductModel)
                .where(ProductModel.id == product_id)
                .values(name=name, price=price, description=description)
            )
            self.db.commit()
        return result.rowcount

    def delete_product(self, product_id: int) -> int:
        with self._storage_errors():
            result = self.db.execute(delete(ProductModel).where(ProductModel.id == product_id))
            self.db.commit()
        return result.rowcount
