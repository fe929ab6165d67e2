from .produit_repository import ProduitRepository
from .user_repository import UserRepository
from .blob_storage_service import BlobStorageService

__all__ = ["ProduitRepository", "UserRepository", "BlobStorageService"]
