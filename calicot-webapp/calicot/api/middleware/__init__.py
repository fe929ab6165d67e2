from .jwt_middleware import JwtMiddleware
from .cookie_policy_middleware import CookiePolicyMiddleware
from .hsts_middleware import HstsMiddleware
from .error_middleware import UnhandledErrorMiddleware

__all__ = ["JwtMiddleware", "CookiePolicyMiddleware", "HstsMiddleware", "UnhandledErrorMiddleware"]
