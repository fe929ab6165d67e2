from .produits_controller import router as produits_router
from .files_controller import router as files_router
from .users_controller import router as users_router
from .account_controller import router as account_router
from .spa_controller import router as spa_router


__all__ = ["produits_router", "files_router", "users_router", "account_router", "spa_router"]
