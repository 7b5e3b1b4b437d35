# product_api/api/routers/products.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from product_api.data.database import get_db
from product_api.domain.errors import InvalidArgument, NotFound, StorageError
from product_api.domain.schemas import ProductIn, ProductOut
from product_api.services.product_service import ProductService, parse_product_id

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def product_id_param(product_id: str) -> int:
    try:
        return parse_product_id(product_id)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[ProductOut])
def list_products(svc: ProductService = Depends(get_service)):
    try:
        return svc.list_products()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{product_id}", response_model=ProductOut)
def get_product(
    product_id: int = Depends(product_id_param),
    svc: ProductService = Depends(get_service),
):
    try:
        return svc.get_product(product_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=ProductOut)
def create_product(payload: ProductIn, svc: ProductService = Depends(get_service)):
    try:
        return svc.create_product(payload)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    payload: ProductIn,
    product_id: int = Depends(product_id_param),
    svc: ProductService = Depends(get_service),
):
    try:
        return svc.update_product(product_id, payload)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{product_id}", status_code=204, response_class=Response)
def delete_product(
    product_id: int = Depends(product_id_param),
    svc: ProductService = Depends(get_service),
):
    try:
        svc.delete_product(product_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=204)
