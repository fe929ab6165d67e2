# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from bson import json_util
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.produit_repository import ProduitRepository
from ...domain.models.produit import Produit
from ...domain.constants import ProduitFields
from ...domain.exceptions import DocumentNotFoundError
from .mongo_connection import get_produit_collection

logger = logging.getLogger(__name__)

# Operators that run server-side JavaScript or arbitrary expressions
FORBIDDEN_QUERY_OPERATORS = frozenset({"$where", "$function", "$accumulator", "$expr"})


class MongoProduitRepository(ProduitRepository):
    """MongoDB implementation of ProduitRepository, keyed on the `id` field"""

    def __init__(self, produit_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.produit_collection = produit_collection if produit_collection is not None else get_produit_collection()

    async def get_produits(self, query: str) -> List[Produit]:
        """
        List products matching a filter

        Args:
            query: MongoDB extended-JSON filter, e.g. '{"category": "chemises"}'.
                Blank means every product.

        Returns:
            Matching products
        """
        query_filter = self._parse_query(query)
        cursor = self.produit_collection.find(query_filter)
        produits = []
        async for document in cursor:
            produits.append(self._document_to_produit(document))
        return produits

    async def get_produit(self, produit_id: str) -> Produit:
        document = await self.produit_collection.find_one({ProduitFields.ID: produit_id})
        if document is None:
            raise DocumentNotFoundError(produit_id, self.produit_collection.name)
        return self._document_to_produit(document)

    async def exist_produit(self, produit_id: str) -> bool:
        document = await self.produit_collection.find_one(
            {ProduitFields.ID: produit_id},
            projection={ProduitFields.ID: 1},
        )
        return document is not None

    async def add_produit(self, produit: Produit) -> None:
        # A duplicate id raises pymongo's DuplicateKeyError from the unique partition key index
        await self.produit_collection.insert_one(self._produit_to_dict(produit))
        logger.info(f"Added produit {produit.id}")

    async def update_produit(self, produit_id: str, produit: Produit) -> None:
        document = self._produit_to_dict(produit)
        document[ProduitFields.ID] = produit_id
        await self.produit_collection.replace_one(
            {ProduitFields.ID: produit_id},
            document,
            upsert=True,
        )
        logger.info(f"Upserted produit {produit_id}")

    async def delete_produit(self, produit_id: str) -> None:
        result = await self.produit_collection.delete_one({ProduitFields.ID: produit_id})
        if result.deleted_count == 0:
            raise DocumentNotFoundError(produit_id, self.produit_collection.name)
        logger.info(f"Deleted produit {produit_id}")

    @staticmethod
    def _parse_query(query: str) -> Dict[str, Any]:
        if not query or not query.strip():
            return {}
        parsed = json_util.loads(query)
        if not isinstance(parsed, dict):
            raise ValueError("Produit query must be a JSON object")
        _reject_forbidden_operators(parsed)
        return parsed

    def _document_to_produit(self, document: Dict[str, Any]) -> Produit:
        """
        Convert a stored document to the Produit domain model

        Unmodeled fields are kept in `attributes`; Mongo's own _id is dropped.
        """
        attributes = {
            key: value
            for key, value in document.items()
            if key not in ProduitFields.MODELED and key != ProduitFields.MONGO_ID
        }
        return Produit(
            id=document[ProduitFields.ID],
            name=document.get(ProduitFields.NAME, ""),
            description=document.get(ProduitFields.DESCRIPTION),
            price=document.get(ProduitFields.PRICE),
            category=document.get(ProduitFields.CATEGORY),
            image_file_name=document.get(ProduitFields.IMAGE_FILE_NAME),
            attributes=attributes,
        )

    def _produit_to_dict(self, produit: Produit) -> Dict[str, Any]:
        if not produit:
            raise ValueError("Produit cannot be None")

        document: Dict[str, Any] = {
            key: value
            for key, value in produit.attributes.items()
            if key not in ProduitFields.MODELED and key != ProduitFields.MONGO_ID
        }
        document.update({
            ProduitFields.ID: produit.id,
            ProduitFields.NAME: produit.name,
            ProduitFields.DESCRIPTION: produit.description,
            ProduitFields.PRICE: produit.price,
            ProduitFields.CATEGORY: produit.category,
            ProduitFields.IMAGE_FILE_NAME: produit.image_file_name,
        })
        return document


def _reject_forbidden_operators(value: Any) -> None:
    """Raise ValueError when a filter uses a forbidden operator at any depth"""
    if isinstance(value, dict):
        for key, nested in value.items():
            if key in FORBIDDEN_QUERY_OPERATORS:
                raise ValueError(f"Operator {key} is not allowed in produit queries")
            _reject_forbidden_operators(nested)
    elif isinstance(value, list):
        for nested in value:
            _reject_forbidden_operators(nested)
