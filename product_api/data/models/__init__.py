#import modeli zeby SQLAlchemy je zarejestrowal w Base.metadata

from product_api.data.models.product import ProductModel

__all__ = ["ProductModel"]
