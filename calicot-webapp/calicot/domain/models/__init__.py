from .produit import Produit
from .user import User

__all__ = ["Produit", "User"]
