from .mongo_connection import get_database, get_produit_collection, get_user_collection, close_database
from .document_store_setup import initialize_document_store
from .mongo_produit_repository import MongoProduitRepository
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "get_database",
    "get_produit_collection",
    "get_user_collection",
    "close_database",
    "initialize_document_store",
    "MongoProduitRepository",
    "MongoUserRepository",
]
