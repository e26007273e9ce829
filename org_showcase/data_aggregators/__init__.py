"""Data aggregators for fetching live org metrics."""

from .github_aggregator import fetch_member_count
from .github_aggregator import fetch_org_repos
from .hex_aggregator import fetch_package_downloads
from .hex_aggregator import fetch_total_downloads
from .hex_aggregator import normalize_package_name

__all__ = [
    "fetch_org_repos",
    "fetch_member_count",
    "fetch_package_downloads",
    "fetch_total_downloads",
    "normalize_package_name",
]
