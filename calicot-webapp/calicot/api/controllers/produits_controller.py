# Standard library imports
import logging
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...application.dto.produit_dto import ProduitRequest, ProduitResponse, ProduitExistsResponse
from ...application.dto.user_dto import UserResponse
from ...domain.exceptions import DocumentNotFoundError
from ...domain.repositories.produit_repository import ProduitRepository
from ...di.container import get_container
from .dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["produits"])


def _produit_repository() -> ProduitRepository:
    return get_container().get(ProduitRepository)


@router.get("", response_model=List[ProduitResponse])
@router.get("/index", response_model=List[ProduitResponse])
async def list_produits(query: str = Query(default="")) -> List[ProduitResponse]:
    """
    List products matching an optional filter

    Args:
        query: JSON filter document, e.g. {"category": "chemises"}

    Returns:
        List of ProduitResponse objects
    """
    try:
        produits = await _produit_repository().get_produits(query)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid query: {exception}"
        )
    return [ProduitResponse.from_domain(produit) for produit in produits]


@router.get("/details/{produit_id}", response_model=ProduitResponse)
async def get_produit(produit_id: str) -> ProduitResponse:
    try:
        produit = await _produit_repository().get_produit(produit_id)
    except DocumentNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    return ProduitResponse.from_domain(produit)


@router.get("/exists/{produit_id}", response_model=ProduitExistsResponse)
async def exist_produit(produit_id: str) -> ProduitExistsResponse:
    exists = await _produit_repository().exist_produit(produit_id)
    return ProduitExistsResponse(id=produit_id, exists=exists)


@router.post("/create", response_model=ProduitResponse, status_code=status.HTTP_201_CREATED)
async def create_produit(
    request: ProduitRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProduitResponse:
    """
    Create a new product

    Args:
        request: Product fields; the id must not already exist
        current_user: Current authenticated user (from dependency)

    Returns:
        ProduitResponse echoing the stored product
    """
    produit = request.to_domain()
    try:
        await _produit_repository().add_produit(produit)
    except DuplicateKeyError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Produit {produit.id} already exists"
        )
    logger.info(f"User {current_user.user_name} created produit {produit.id}")
    return ProduitResponse.from_domain(produit)


@router.put("/edit/{produit_id}", response_model=ProduitResponse)
async def update_produit(
    produit_id: str,
    request: ProduitRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProduitResponse:
    produit = request.to_domain()
    await _produit_repository().update_produit(produit_id, produit)
    logger.info(f"User {current_user.user_name} updated produit {produit_id}")
    produit.id = produit_id
    return ProduitResponse.from_domain(produit)


@router.delete("/delete/{produit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_produit(
    produit_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> Response:
    try:
        await _produit_repository().delete_produit(produit_id)
    except DocumentNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    logger.info(f"User {current_user.user_name} deleted produit {produit_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
