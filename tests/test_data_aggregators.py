"""Tests for the GitHub and Hex.pm fetch helpers."""

import asyncio

import httpx

from org_showcase.config import GITHUB_API_BASE
from org_showcase.config import HEX_API_BASE
from org_showcase.data_aggregators import fetch_member_count
from org_showcase.data_aggregators import fetch_org_repos
from org_showcase.data_aggregators import fetch_package_downloads
from org_showcase.data_aggregators import fetch_total_downloads
from org_showcase.data_aggregators import normalize_package_name
from org_showcase.data_aggregators.github_aggregator import _get_headers


def test_headers_include_token_when_set(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "secret-token")
    headers = _get_headers()
    assert headers["Authorization"] == "Bearer secret-token"
    assert headers["Accept"] == "application/vnd.github.v3+json"


def test_headers_without_token(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    assert "Authorization" not in _get_headers()


def test_token_is_sent_to_github(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "abc123")
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json=[])

    repos = asyncio.run(fetch_org_repos(transport=httpx.MockTransport(handler)))

    assert repos == []
    assert seen["auth"] == "Bearer abc123"


def test_fetch_org_repos_uses_given_org():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == httpx.URL(f"{GITHUB_API_BASE}/orgs/elixir-lang/repos").path
        return httpx.Response(200, json=[])

    assert asyncio.run(fetch_org_repos("elixir-lang", transport=httpx.MockTransport(handler))) == []


def test_fetch_org_repos_ignores_extra_fields():
    payload = [
        {
            "name": "bamboo",
            "description": "Email",
            "stargazers_count": 1,
            "forks_count": 2,
            "language": "Elixir",
            "topics": [],
            "html_url": "https://github.com/beam-community/bamboo",
            "homepage": None,
            "archived": False,
            "open_issues_count": 12,
            "owner": {"login": "beam-community"},
        }
    ]
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
    repos = asyncio.run(fetch_org_repos(transport=transport))
    assert [r.name for r in repos] == ["bamboo"]


def test_fetch_member_count_not_a_list():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"members": []}))
    assert asyncio.run(fetch_member_count(transport=transport)) is None


def test_normalize_package_name():
    assert normalize_package_name("stripity-stripe") == "stripity_stripe"
    assert normalize_package_name("ex_machina") == "ex_machina"
    assert normalize_package_name("elixir-companies-list") == "elixir_companies_list"


class TestHexDownloads:
    """Tests for the Hex.pm download fan-out."""

    def test_single_package(self):
        async def run():
            transport = httpx.MockTransport(
                lambda request: httpx.Response(200, json={"downloads": {"all": 42, "recent": 2}})
            )
            async with httpx.AsyncClient(transport=transport) as client:
                return await fetch_package_downloads(client, "bamboo")

        assert asyncio.run(run()) == 42

    def test_missing_downloads_field(self):
        async def run():
            transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"name": "bamboo"}))
            async with httpx.AsyncClient(transport=transport) as client:
                return await fetch_package_downloads(client, "bamboo")

        assert asyncio.run(run()) is None

    def test_normalized_names_are_requested(self):
        paths = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            return httpx.Response(404)

        asyncio.run(fetch_total_downloads(["stripity-stripe"], transport=httpx.MockTransport(handler)))

        assert paths == [httpx.URL(f"{HEX_API_BASE}/packages/stripity_stripe").path]

    def test_unexpected_errors_contribute_zero(self):
        def handler(request: httpx.Request) -> httpx.Response:
            name = request.url.path.rsplit("/", 1)[-1]
            if name == "broken":
                raise RuntimeError("unexpected")
            if name == "garbage":
                return httpx.Response(200, content=b"not json")
            return httpx.Response(200, json={"downloads": {"all": 10}})

        total = asyncio.run(
            fetch_total_downloads(["ok", "broken", "garbage", "fine"], transport=httpx.MockTransport(handler))
        )
        assert total == 20

    def test_no_projects(self):
        assert asyncio.run(fetch_total_downloads([])) == 0
