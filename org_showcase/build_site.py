#!/usr/bin/env python3
"""Build the static site from live org data."""

import asyncio
import logging
from datetime import datetime
from datetime import timezone
from pathlib import Path
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

import click
from jinja2 import Environment
from jinja2 import FileSystemLoader
from jinja2 import select_autoescape

from . import content
from .aggregator import STATS_STRATEGIES
from .aggregator import load_site_data
from .config import ORG
from .logging_config import setup_logging
from .models import ProjectRecord
from .models import SiteData

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
OUTPUT_DIR = Path("public")


def split_featured(projects: Sequence[ProjectRecord]) -> Tuple[List[ProjectRecord], List[ProjectRecord]]:
    """Split projects into featured and the rest, keeping their order."""
    featured = [p for p in projects if p.is_featured]
    others = [p for p in projects if not p.is_featured]
    return featured, others


def generate_page(site_data: SiteData, templates_dir: Path = TEMPLATES_DIR, output_dir: Path = OUTPUT_DIR) -> Path:
    """Render index.html from the site data and write it to output_dir."""
    if not templates_dir.exists():
        logger.error(f"Templates directory not found at {templates_dir}")
        raise FileNotFoundError(f"Templates directory not found at {templates_dir}")

    env = Environment(loader=FileSystemLoader(templates_dir), autoescape=select_autoescape(["html"]))
    template = env.get_template("index.html")

    featured, others = split_featured(site_data.projects)
    last_updated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    html = template.render(
        org=ORG,
        org_url=content.GITHUB_ORG_URL,
        nav_links=content.NAV_LINKS,
        about_features=content.ABOUT_FEATURES,
        involvement_cards=content.INVOLVEMENT_CARDS,
        footer_links=content.FOOTER_LINKS,
        featured_projects=featured,
        other_projects=others,
        stats=site_data.stats,
        from_fallback=site_data.from_fallback,
        last_updated=last_updated,
    )

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / "index.html"
    output_file.write_text(html, encoding="utf-8")
    logger.info(f"Generated HTML page at {output_file}")
    return output_file


@click.command()
@click.option("--output", "output_dir", type=click.Path(file_okay=False, path_type=Path), default=OUTPUT_DIR)
@click.option(
    "--templates",
    "templates_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=TEMPLATES_DIR,
    help="Directory containing index.html",
)
@click.option(
    "--stats-variant",
    type=click.Choice(sorted(STATS_STRATEGIES)),
    default=None,
    help="Extra org stat to show (defaults to ORG_STATS_VARIANT)",
)
@click.option("--log-level", default="INFO", show_default=True)
def main(output_dir: Path, templates_dir: Path, stats_variant: Optional[str], log_level: str) -> None:
    """Fetch org data and write the static page."""
    setup_logging(log_level)
    logger.info(f"Building site for {ORG}")

    try:
        site_data = asyncio.run(load_site_data(stats_variant))
        if site_data.from_fallback:
            logger.info("Live project data unavailable, page built from fallback data")
        generate_page(site_data, templates_dir, output_dir)
        logger.info("Site build completed successfully")
    except Exception as e:
        logger.error(f"Error building site: {str(e)}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
