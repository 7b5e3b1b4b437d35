# product_api/services/product_service.py
from sqlalchemy.orm import Session

from product_api.data.models.product import ProductModel
from product_api.domain.errors import InvalidArgument, NotFound
from product_api.domain.schemas import ProductIn, ProductOut
from product_api.repos.product_repo import ProductRepo
from product_api.utils.logging import get_logger

logger = get_logger(__name__)

MIN_PRODUCT_ID = -(2**63)
MAX_PRODUCT_ID = 2**63 - 1


class ProductService:
    """
    Serwis obsługujący Use Case'y dla domeny Product.
    Bezstanowy: trzyma tylko repozytorium nad sesją bieżącego requestu.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    # =====================================================
    # QUERY
    # =====================================================
    def list_products(self) -> list[ProductOut]:
        """
        Use Case: Lista wszystkich produktów (Query).
        Pusta tabela -> pusta lista.
        """
        return [ProductOut.model_validate(p) for p in self.repo.list_products()]

    def get_product(self, product_id: int) -> ProductOut:
        """
        Use Case: Pobranie produktu (Query).
        """
        product = self.repo.get_product(product_id)

        if not product:
            raise NotFound("Product not found")

        return ProductOut.model_validate(product)

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_product(self, payload: ProductIn) -> ProductOut:
        """
        Use Case: Utworzenie produktu (Command).
        id z body jest ignorowane, nadaje je baza.
        """
        created = self.repo.create_product(
            ProductModel(
                name=payload.name,
                price=payload.price,
                description=payload.description,
            )
        )

        logger.info(f"Product {created.id} created")

        return ProductOut.model_validate(created)

    def update_product(self, product_id: int, payload: ProductIn) -> ProductOut:
        """
        Use Case: Aktualizacja produktu (Command).
        Bez sprawdzania istnienia: zwraca przesłane pola z id ze ścieżki,
        nawet gdy żaden wiersz nie został zmieniony.
        """
        rowcount = self.repo.update_product(
            product_id,
            name=payload.name,
            price=payload.price,
            description=payload.description,
        )

        if rowcount == 0:
            logger.warning(f"Update of product {product_id} matched no rows")
        else:
            logger.info(f"Product {product_id} updated")

        return ProductOut(
            id=product_id,
            name=payload.name,
            price=payload.price,
            description=payload.description,
        )

    def delete_product(self, product_id: int) -> None:
        """
        Use Case: Usunięcie produktu (Command).
        """
        rowcount = self.repo.delete_product(product_id)

        if rowcount == 0:
            logger.warning(f"Delete of product {product_id} matched no rows")
        else:
            logger.info(f"Product {product_id} deleted")


def parse_product_id(raw: str) -> int:
    """
    Id ze ścieżki: opcjonalny znak i cyfry dziesiętne, w zakresie int64.
    """
    digits = raw[1:] if raw[:1] in ("+", "-") else raw
    if not digits or not digits.isascii() or not digits.isdigit():
        raise InvalidArgument("Invalid product ID")
    value = int(raw)
    if not MIN_PRODUCT_ID <= value <= MAX_PRODUCT_ID:
        raise InvalidArgument("Invalid product ID")
    return value
