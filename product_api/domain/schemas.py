# product_api/domain/schemas.py
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class ProductIn(BaseModel):
    """
    Schema dla tworzenia/aktualizacji produktu.
    Pominięte pola i null przyjmują wartości zerowe; typy nie są konwertowane ("9.99" jako cena -> błąd).
    """

    id: int | None = None  # ignorowane, id nadaje baza
    name: str = ""
    price: float = 0.0
    description: str = ""

    model_config = ConfigDict(strict=True)

    @field_validator("name", "price", "description", mode="before")
    @classmethod
    def null_as_zero_value(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
    price: float
    description: str

    model_config = ConfigDict(from_attributes=True)
