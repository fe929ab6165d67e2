"""
Cookie policy applied to every cookie the application appends or deletes.

SameSite=None cookies are downgraded to SameSite=Lax. There is no
user-agent detection: the rewrite applies to every client.
"""
# Standard library imports
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional


class SameSiteMode(str, Enum):
    UNSPECIFIED = "unspecified"
    NONE = "none"
    LAX = "lax"
    STRICT = "strict"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SameSiteMode":
        if not value:
            return cls.UNSPECIFIED
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNSPECIFIED


@dataclass(frozen=True)
class CookieOptions:
    """Attributes of a cookie being appended or deleted"""
    same_site: SameSiteMode = SameSiteMode.UNSPECIFIED
    secure: bool = False
    http_only: bool = False
    path: str = "/"
    domain: Optional[str] = None
    max_age: Optional[int] = None


# Unspecified tightens nothing
MINIMUM_SAME_SITE_POLICY = SameSiteMode.UNSPECIFIED

_STRICTNESS = {
    SameSiteMode.UNSPECIFIED: -1,
    SameSiteMode.NONE: 0,
    SameSiteMode.LAX: 1,
    SameSiteMode.STRICT: 2,
}


def check_same_site(
    options: CookieOptions,
    minimum_same_site: SameSiteMode = MINIMUM_SAME_SITE_POLICY,
) -> CookieOptions:
    """
    Return the options to emit.

    A mode looser than minimum_same_site is raised to it, then
    SameSite=None becomes SameSite=Lax.
    """
    if _STRICTNESS[options.same_site] < _STRICTNESS[minimum_same_site]:
        options = replace(options, same_site=minimum_same_site)
    if options.same_site == SameSiteMode.NONE:
        return replace(options, same_site=SameSiteMode.LAX)
    return options


def apply_to_set_cookie_header(header_value: str) -> str:
    """
    Apply the policy to a raw Set-Cookie header value.

    Only the SameSite attribute is touched; name, value and the other
    attributes are kept byte for byte.
    """
    parts: List[str] = header_value.split(";")
    for index, part in enumerate(parts):
        name, _, value = part.strip().partition("=")
        if name.lower() != "samesite":
            continue
        options = check_same_site(CookieOptions(same_site=SameSiteMode.parse(value)))
        if options.same_site != SameSiteMode.parse(value):
            leading = part[:len(part) - len(part.lstrip())]
            parts[index] = f"{leading}SameSite={options.same_site.value.capitalize()}"
    return ";".join(parts)
