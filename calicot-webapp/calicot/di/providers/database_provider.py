from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_produit_collection,
    get_user_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized document store provider - single source of truth for DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the product and user collections as singletons.
        The motor client behind them is shared and safe for concurrent use.
        """
        container.register_singleton("produit_collection", get_produit_collection())
        container.register_singleton("user_collection", get_user_collection())
