"""Constants for domain model field names"""

from .produit_fields import ProduitFields
from .user_fields import UserFields

__all__ = [
    "ProduitFields",
    "UserFields",
]
