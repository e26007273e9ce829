"""Print the live org snapshot without rendering anything."""

from __future__ import annotations

import asyncio
import time

import click

from .aggregator import STATS_STRATEGIES
from .aggregator import load_site_data
from .config import ORG


@click.command()
@click.option("--stats-variant", type=click.Choice(sorted(STATS_STRATEGIES)), default=None)
def main(stats_variant: str | None) -> None:
    """Fetch projects and stats once and dump them as key=value lines."""
    t0 = time.perf_counter()
    site_data = asyncio.run(load_site_data(stats_variant))
    t1 = time.perf_counter()

    print(f"org={ORG}")
    print(f"load_seconds={t1 - t0:.3f}")
    print(f"projects={len(site_data.projects)}")
    print(f"featured={sum(1 for p in site_data.projects if p.is_featured)}")
    print(f"from_fallback={str(site_data.from_fallback).lower()}")
    for key, value in site_data.stats.model_dump().items():
        print(f"{key}={value}")


if __name__ == "__main__":
    main()
