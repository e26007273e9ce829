"""Aggregate live org data for the site, falling back to static data.

Nothing in here raises because an API is down: every external lookup
degrades to the values in ``fallback`` so the page always builds.
"""

import logging
from typing import Awaitable
from typing import Callable
from typing import Dict
from typing import List
from typing import Optional
from typing import Sequence

import httpx

from .config import EXCLUDED_REPOS
from .config import FEATURED_COUNT
from .config import ORG
from .config import ORG_STATS_VARIANT
from .data_aggregators import fetch_member_count
from .data_aggregators import fetch_org_repos
from .data_aggregators import fetch_total_downloads
from .fallback import FALLBACK_STATS
from .fallback import fallback_projects
from .models import GitHubRepo
from .models import OrgStatsSnapshot
from .models import ProjectRecord
from .models import SiteData

logger = logging.getLogger(__name__)

Transport = Optional[httpx.AsyncBaseTransport]


def rank_projects(repos: Sequence[GitHubRepo], featured_count: int = FEATURED_COUNT) -> List[ProjectRecord]:
    """Turn API repos into site projects.

    Drops archived and excluded repos, orders by stars (stable, so API order
    breaks ties) and flags the first ``featured_count`` as featured.
    """
    projects = [repo.to_project() for repo in repos if not repo.archived and repo.name not in EXCLUDED_REPOS]

    # The API sorts by stars already, but don't rely on it
    projects.sort(key=lambda p: p.stars, reverse=True)

    return [
        project.model_copy(update={"is_featured": True}) if rank < featured_count else project
        for rank, project in enumerate(projects)
    ]


async def _fetch_projects(org: str, transport: Transport) -> Optional[List[ProjectRecord]]:
    repos = await fetch_org_repos(org, transport=transport)
    if repos is None:
        return None
    return rank_projects(repos)


async def fetch_projects(org: str = ORG, *, transport: Transport = None) -> List[ProjectRecord]:
    """Fetch the org's projects, or the fallback list if GitHub is unavailable."""
    projects = await _fetch_projects(org, transport)
    if projects is None:
        return fallback_projects()

    logger.info(f"Fetched {len(projects)} projects for {org}")
    return projects


async def _add_downloads(
    stats: OrgStatsSnapshot, projects: Sequence[ProjectRecord], org: str, transport: Transport
) -> None:
    try:
        stats.total_downloads = await fetch_total_downloads([p.name for p in projects], transport=transport)
    except Exception as exc:
        logger.warning(f"Download aggregation failed, using fallback: {exc}")
        stats.total_downloads = FALLBACK_STATS.total_downloads


async def _add_member_count(
    stats: OrgStatsSnapshot, projects: Sequence[ProjectRecord], org: str, transport: Transport
) -> None:
    member_count = await fetch_member_count(org, transport=transport)
    if member_count is None:
        member_count = FALLBACK_STATS.member_count
    stats.member_count = member_count


async def _no_extra_stats(
    stats: OrgStatsSnapshot, projects: Sequence[ProjectRecord], org: str, transport: Transport
) -> None:
    return None


StatsStrategy = Callable[[OrgStatsSnapshot, Sequence[ProjectRecord], str, Transport], Awaitable[None]]

STATS_STRATEGIES: Dict[str, StatsStrategy] = {
    "downloads": _add_downloads,
    "members": _add_member_count,
    "none": _no_extra_stats,
}


def summarize_projects(projects: Sequence[ProjectRecord]) -> OrgStatsSnapshot:
    """Local totals only, no network."""
    return OrgStatsSnapshot(
        total_stars=sum(p.stars for p in projects),
        total_forks=sum(p.forks for p in projects),
        project_count=len(projects),
    )


async def compute_stats(
    projects: Sequence[ProjectRecord],
    variant: Optional[str] = None,
    *,
    org: str = ORG,
    transport: Transport = None,
) -> OrgStatsSnapshot:
    """Compute org stats for the given projects.

    Args:
        projects: Projects as returned by fetch_projects
        variant: "downloads" adds total Hex downloads, "members" adds the org
            member count, "none" adds nothing. Defaults to ORG_STATS_VARIANT.
        org: GitHub organization login, used by the members lookup
        transport: Optional httpx transport, used by tests

    Returns:
        Stats snapshot; auxiliary fields fall back to defaults on failure

    Raises:
        ValueError: If the variant is unknown
    """
    variant = (variant or ORG_STATS_VARIANT).lower()
    strategy = STATS_STRATEGIES.get(variant)
    if strategy is None:
        raise ValueError(f"Unknown stats variant {variant!r}, expected one of {sorted(STATS_STRATEGIES)}")

    stats = summarize_projects(projects)
    await strategy(stats, projects, org, transport)
    return stats


async def load_site_data(
    variant: Optional[str] = None,
    *,
    org: str = ORG,
    transport: Transport = None,
) -> SiteData:
    """Fetch projects and stats once for a page build."""
    projects = await _fetch_projects(org, transport)
    from_fallback = projects is None
    if from_fallback:
        projects = fallback_projects()

    stats = await compute_stats(projects, variant, org=org, transport=transport)
    return SiteData(projects=projects, stats=stats, from_fallback=from_fallback)
