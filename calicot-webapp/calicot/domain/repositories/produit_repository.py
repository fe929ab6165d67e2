from abc import ABC, abstractmethod
from typing import List
from ..models.produit import Produit


class ProduitRepository(ABC):
    """
    Document store contract for the Produit collection.

    Implementations map each call to one remote operation. Driver errors
    propagate unchanged; a missing document is reported as
    DocumentNotFoundError.
    """

    @abstractmethod
    async def get_produits(self, query: str) -> List[Produit]:
        """List products matching a filter string (blank = all)"""
        pass

    @abstractmethod
    async def get_produit(self, produit_id: str) -> Produit:
        """Fetch one product, raising DocumentNotFoundError when absent"""
        pass

    @abstractmethod
    async def exist_produit(self, produit_id: str) -> bool:
        """Check whether a product exists"""
        pass

    @abstractmethod
    async def add_produit(self, produit: Produit) -> None:
        """Insert a new product"""
        pass

    @abstractmethod
    async def update_produit(self, produit_id: str, produit: Produit) -> None:
        """Create or replace the product stored under produit_id"""
        pass

    @abstractmethod
    async def delete_produit(self, produit_id: str) -> None:
        """Delete a product, raising DocumentNotFoundError when absent"""
        pass
