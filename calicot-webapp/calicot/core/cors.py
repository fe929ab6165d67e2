"""
CORS policies.

Production allows a fixed list of origins. Development allows any origin
that mentions localhost and lets credentials through.
"""
# Standard library imports
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

POLICY_NAME = "CorsPolicy"
DEV_POLICY_NAME = "DevCorsPolicy"

PRODUCTION_ORIGINS: Tuple[str, ...] = (
    "https://calicot-webapp.azurewebsites.net",
    "https://accounts.google.com",
    "https://play.google.com",
    "https://localhost",
)

# Browsers clamp this to their own ceiling
UNBOUNDED_PREFLIGHT_MAX_AGE = 2**31 - 1

# Starlette full-matches this pattern, so it behaves as "contains localhost"
LOCALHOST_ORIGIN_PATTERN = r".*localhost.*"


@dataclass(frozen=True)
class CorsPolicy:
    name: str
    allow_origins: Tuple[str, ...] = ()
    allow_origin_regex: Optional[str] = None
    allow_credentials: bool = False
    max_age: int = 600
    allow_methods: Tuple[str, ...] = field(default=("*",))
    allow_headers: Tuple[str, ...] = field(default=("*",))

    def is_origin_allowed(self, origin: str) -> bool:
        if origin in self.allow_origins:
            return True
        if self.allow_origin_regex is not None:
            return re.fullmatch(self.allow_origin_regex, origin) is not None
        return False

    def middleware_options(self) -> Dict[str, Any]:
        """Keyword arguments for starlette's CORSMiddleware"""
        return {
            "allow_origins": list(self.allow_origins),
            "allow_origin_regex": self.allow_origin_regex,
            "allow_credentials": self.allow_credentials,
            "allow_methods": list(self.allow_methods),
            "allow_headers": list(self.allow_headers),
            "max_age": self.max_age,
        }


def production_cors_policy() -> CorsPolicy:
    return CorsPolicy(
        name=POLICY_NAME,
        allow_origins=PRODUCTION_ORIGINS,
        max_age=UNBOUNDED_PREFLIGHT_MAX_AGE,
    )


def development_cors_policy() -> CorsPolicy:
    return CorsPolicy(
        name=DEV_POLICY_NAME,
        allow_origin_regex=LOCALHOST_ORIGIN_PATTERN,
        allow_credentials=True,
    )


def cors_policy_for(is_development: bool) -> CorsPolicy:
    return development_cors_policy() if is_development else production_cors_policy()
