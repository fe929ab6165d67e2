# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Produit:
    """
    Pure domain model for the Produit (catalog product) entity.

    The id doubles as the document partition key. Fields the catalog does
    not model explicitly travel in `attributes`.
    """
    id: str
    name: str = ""
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    image_file_name: Optional[str] = None  # Blob name of the product picture
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Business validations"""
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("Produit id is required")
