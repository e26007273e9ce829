"""Fetch the org's repositories and members from the GitHub REST API.

Uses GitHub REST API v3. With a token, rate limit is 5,000 requests/hour.
Without a token, rate limit is 60 requests/hour, which is still enough for
one site build.

Set GITHUB_TOKEN environment variable for authenticated requests.
"""

import logging
import os
from typing import Any
from typing import List
from typing import Optional

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError

from ..config import GITHUB_API_BASE
from ..config import HTTP_TIMEOUT
from ..config import ORG
from ..config import REPOS_PER_PAGE
from ..models import GitHubRepo

logger = logging.getLogger(__name__)

_REPO_LIST = TypeAdapter(List[GitHubRepo])


def _get_headers() -> dict[str, str]:
    """Build headers for GitHub API requests."""
    headers = {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": "org-showcase/1.0",
    }
    token = os.getenv("GITHUB_TOKEN")
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


async def _get_json_list(
    url: str,
    what: str,
    *,
    params: Optional[dict[str, Any]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[list]:
    """GET a GitHub endpoint that returns a JSON array.

    Returns None on transport errors, non-2xx statuses and non-list bodies.
    """
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT, transport=transport) as client:
        try:
            response = await client.get(url, headers=_get_headers(), params=params)
        except httpx.RequestError as exc:
            logger.warning(f"GitHub request failed for {what}: {exc}")
            return None

    if response.status_code == 403:
        logger.warning(f"GitHub rate limit exceeded or access denied for {what}")
        return None

    if not response.is_success:
        logger.warning(f"GitHub API error {response.status_code} for {what}")
        return None

    try:
        payload = response.json()
    except ValueError as exc:
        logger.warning(f"GitHub returned invalid JSON for {what}: {exc}")
        return None

    if not isinstance(payload, list):
        logger.warning(f"GitHub returned {type(payload).__name__} instead of a list for {what}")
        return None

    return payload


async def fetch_org_repos(
    org: str = ORG,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[List[GitHubRepo]]:
    """Fetch up to one page of the org's repositories, most starred first.

    Args:
        org: GitHub organization login
        transport: Optional httpx transport, used by tests

    Returns:
        Validated repositories in API order, or None if the fetch failed
        or the payload was malformed
    """
    payload = await _get_json_list(
        f"{GITHUB_API_BASE}/orgs/{org}/repos",
        f"{org} repos",
        params={"per_page": REPOS_PER_PAGE, "sort": "stars", "direction": "desc"},
        transport=transport,
    )
    if payload is None:
        return None

    try:
        return _REPO_LIST.validate_python(payload)
    except ValidationError as exc:
        logger.warning(f"Malformed repos payload for {org}: {exc.error_count()} validation errors")
        return None


async def fetch_member_count(
    org: str = ORG,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[int]:
    """Count the org's members.

    Without a token only public members are listed.

    Returns:
        Number of members, or None if the fetch failed
    """
    members = await _get_json_list(
        f"{GITHUB_API_BASE}/orgs/{org}/members",
        f"{org} members",
        params={"per_page": 100},
        transport=transport,
    )
    if members is None:
        return None
    return len(members)
