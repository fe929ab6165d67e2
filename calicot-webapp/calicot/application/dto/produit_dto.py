from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ...domain.models.produit import Produit


class ProduitRequest(BaseModel):
    """DTO for product create/update requests"""
    id: str = Field(min_length=1)
    name: str = ""
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    image_file_name: Optional[str] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)

    def to_domain(self) -> Produit:
        return Produit(
            id=self.id,
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
            image_file_name=self.image_file_name,
            attributes=dict(self.attributes),
        )


class ProduitResponse(BaseModel):
    """DTO for product response"""
    id: str
    name: str = ""
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    image_file_name: Optional[str] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, produit: Produit) -> "ProduitResponse":
        return cls(
            id=produit.id,
            name=produit.name,
            description=produit.description,
            price=produit.price,
            category=produit.category,
            image_file_name=produit.image_file_name,
            attributes=produit.attributes,
        )


class ProduitExistsResponse(BaseModel):
    id: str
    exists: bool
