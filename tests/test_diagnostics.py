"""Tests for the diagnostics command."""

from click.testing import CliRunner

from org_showcase import diagnostics
from org_showcase.config import ORG
from org_showcase.fallback import fallback_projects
from org_showcase.models import OrgStatsSnapshot
from org_showcase.models import SiteData


def _run(monkeypatch, site_data, args=()):
    calls = []

    async def fake_load_site_data(variant=None):
        calls.append(variant)
        return site_data

    monkeypatch.setattr(diagnostics, "load_site_data", fake_load_site_data)
    result = CliRunner().invoke(diagnostics.main, list(args))
    assert result.exit_code == 0, result.output
    lines = dict(line.split("=", 1) for line in result.output.splitlines())
    return lines, calls


def test_prints_snapshot_as_key_value_lines(monkeypatch):
    site_data = SiteData(
        projects=fallback_projects(),
        stats=OrgStatsSnapshot(total_stars=7277, total_forks=1391, project_count=8, total_downloads=42),
        from_fallback=True,
    )

    lines, calls = _run(monkeypatch, site_data, ["--stats-variant", "downloads"])

    assert calls == ["downloads"]
    assert lines["org"] == ORG
    assert float(lines["load_seconds"]) >= 0
    assert lines["projects"] == "8"
    assert lines["featured"] == "6"
    assert lines["from_fallback"] == "true"
    assert lines["total_stars"] == "7277"
    assert lines["total_forks"] == "1391"
    assert lines["project_count"] == "8"
    assert lines["total_downloads"] == "42"
    assert lines["member_count"] == "None"


def test_live_snapshot_without_projects(monkeypatch):
    site_data = SiteData(
        projects=[],
        stats=OrgStatsSnapshot(total_stars=0, total_forks=0, project_count=0, member_count=3),
    )

    lines, calls = _run(monkeypatch, site_data)

    assert calls == [None]
    assert lines["projects"] == "0"
    assert lines["featured"] == "0"
    assert lines["from_fallback"] == "false"
    assert lines["member_count"] == "3"
