"""Fetch package download counts from the Hex.pm registry.

The Hex.pm API is public and needs no authentication for package info.
"""

import asyncio
import logging
from typing import Iterable
from typing import Optional

import httpx

from ..config import HEX_API_BASE
from ..config import HTTP_TIMEOUT

logger = logging.getLogger(__name__)


def normalize_package_name(repo_name: str) -> str:
    """Map a repository name to its Hex package name.

    Examples:
        >>> normalize_package_name("stripity-stripe")
        "stripity_stripe"
        >>> normalize_package_name("ex_machina")
        "ex_machina"
    """
    return repo_name.replace("-", "_")


async def fetch_package_downloads(client: httpx.AsyncClient, package_name: str) -> Optional[int]:
    """Fetch the all-time download count of one Hex package.

    Returns:
        Download count, or None if the package is unknown or the fetch failed
    """
    try:
        response = await client.get(f"{HEX_API_BASE}/packages/{package_name}")
    except httpx.RequestError as exc:
        logger.debug(f"Hex request failed for {package_name}: {exc}")
        return None

    if response.status_code == 404:
        # Most org repos are not published packages
        logger.debug(f"Hex package not found: {package_name}")
        return None

    if not response.is_success:
        logger.debug(f"Hex API error {response.status_code} for {package_name}")
        return None

    data = response.json()
    downloads = data.get("downloads") if isinstance(data, dict) else None
    total = downloads.get("all") if isinstance(downloads, dict) else None
    if not isinstance(total, int):
        return None
    return total


async def fetch_total_downloads(
    repo_names: Iterable[str],
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """Sum Hex downloads over all repositories, one request per repository.

    Lookups run in parallel and every one is awaited; a lookup that fails for
    any reason contributes 0 instead of cancelling the others.
    """
    names = [normalize_package_name(name) for name in repo_names]
    if not names:
        return 0

    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT, transport=transport) as client:
        results = await asyncio.gather(
            *[fetch_package_downloads(client, name) for name in names],
            return_exceptions=True,
        )

    total = 0
    failed = 0
    for name, result in zip(names, results):
        if isinstance(result, BaseException):
            logger.debug(f"Failed to fetch Hex downloads for {name}: {result}")
            failed += 1
        elif result is None:
            failed += 1
        else:
            total += result

    logger.info(f"Summed Hex downloads for {len(names) - failed}/{len(names)} packages: {total:,}")
    return total
