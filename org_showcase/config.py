"""Site configuration read from the environment."""

import os
from typing import Final

from dotenv import load_dotenv

load_dotenv()

ORG: Final[str] = os.getenv("ORG_SHOWCASE_ORG", "beam-community")

GITHUB_API_BASE: Final[str] = os.getenv("GITHUB_API_BASE", "https://api.github.com").rstrip("/")
HEX_API_BASE: Final[str] = os.getenv("HEX_API_BASE", "https://hex.pm/api").rstrip("/")
HTTP_TIMEOUT: Final[float] = float(os.getenv("HTTP_TIMEOUT", "10"))

# downloads | members | none
ORG_STATS_VARIANT: Final[str] = os.getenv("ORG_STATS_VARIANT", "downloads").lower()

FEATURED_COUNT: Final[int] = 6
REPOS_PER_PAGE: Final[int] = 100

# Org tooling repos that are not projects
EXCLUDED_REPOS: Final[frozenset[str]] = frozenset(
    {
        "beam-community.org",
        "common-config",
        "actions-sync",
        "actions-pr-title",
    }
)


__all__ = [
    "ORG",
    "GITHUB_API_BASE",
    "HEX_API_BASE",
    "HTTP_TIMEOUT",
    "ORG_STATS_VARIANT",
    "FEATURED_COUNT",
    "REPOS_PER_PAGE",
    "EXCLUDED_REPOS",
]
