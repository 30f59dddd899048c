from typing import List

from fastapi import APIRouter, Depends, Response, status

from salestrack.core.constants import API_PREFIX
from salestrack.dependencies import get_sale_service, require_user
from salestrack.schemas.sale import SaleCreate, SaleRead, SaleUpdate
from salestrack.services.sale_service import SaleService

router = APIRouter(prefix=f"{API_PREFIX}/sales", tags=["Sales"])


@router.get("", response_model=List[SaleRead])
def list_sales(
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    return service.list()


@router.get("/{sale_id}", response_model=SaleRead)
def get_sale(
    sale_id: int,
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    return service.get(sale_id)


@router.post("", response_model=SaleRead, status_code=status.HTTP_201_CREATED)
def create_sale(
    payload: SaleCreate,
    response: Response,
    service: SaleService = Depends(get_sale_service),
    user: str = Depends(require_user),
):
    sale = service.create(payload, user)
    response.headers["Location"] = f"{API_PREFIX}/sales/{sale.id}"
    return sale


@router.put("/{sale_id}", response_model=SaleRead)
def update_sale(
    sale_id: int,
    payload: SaleUpdate,
    service: SaleService = Depends(get_sale_service),
    user: str = Depends(require_user),
):
    return service.update(sale_id, payload, user)


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(
    sale_id: int,
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    service.delete(sale_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
