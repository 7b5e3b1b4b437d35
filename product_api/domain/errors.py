# product_api/domain/errors.py


class ProductError(Exception):
    """Bazowy wyjątek domeny Product."""


class InvalidArgument(ProductError, ValueError):
    """Niepoprawne dane wejściowe (id w ścieżce, body) -> 400."""


class NotFound(ProductError, LookupError):
    """Brak wiersza dla podanego id -> 404."""


class StorageError(ProductError):
    """Dowolny błąd warstwy bazy danych -> 500, komunikat przekazywany bez zmian."""
