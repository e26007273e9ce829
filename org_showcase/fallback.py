"""Static data shown when the live APIs cannot be reached."""

from typing import List

from .models import OrgStatsSnapshot
from .models import ProjectRecord

FALLBACK_PROJECTS: List[ProjectRecord] = [
    ProjectRecord(
        name="ex_machina",
        description="Create test data for Elixir applications",
        stars=2041,
        forks=146,
        language="Elixir",
        topics=["elixir", "testing"],
        url="https://github.com/beam-community/ex_machina",
        homepage="https://hex.pm/packages/ex_machina",
        is_featured=True,
    ),
    ProjectRecord(
        name="bamboo",
        description="Testable, composable, and adapter based Elixir email library for devs that love piping",
        stars=1951,
        forks=344,
        language="Elixir",
        topics=["elixir", "email"],
        url="https://github.com/beam-community/bamboo",
        homepage="https://hex.pm/packages/bamboo",
        is_featured=True,
    ),
    ProjectRecord(
        name="elixir-companies",
        description="A list of companies currently using Elixir in production",
        stars=1663,
        forks=367,
        language="Elixir",
        topics=["elixir"],
        url="https://github.com/beam-community/elixir-companies",
        homepage=None,
        is_featured=True,
    ),
    ProjectRecord(
        name="stripity-stripe",
        description="An Elixir Library for Stripe",
        stars=990,
        forks=340,
        language="Elixir",
        topics=["elixir", "stripe"],
        url="https://github.com/beam-community/stripity-stripe",
        homepage="https://hex.pm/packages/stripity_stripe",
        is_featured=True,
    ),
    ProjectRecord(
        name="jsonapi",
        description="JSON:API Serializer and Query Handler for Elixir",
        stars=504,
        forks=158,
        language="Elixir",
        topics=["elixir", "json-api"],
        url="https://github.com/beam-community/jsonapi",
        homepage="https://hex.pm/packages/jsonapi",
        is_featured=True,
    ),
    ProjectRecord(
        name="avro_ex",
        description="An Avro Library that emphasizes testability and ease of use",
        stars=61,
        forks=25,
        language="Elixir",
        topics=["elixir", "avro"],
        url="https://github.com/beam-community/avro_ex",
        homepage="https://hex.pm/packages/avro_ex",
        is_featured=True,
    ),
    ProjectRecord(
        name="ueberauth",
        description="An Elixir Authentication System for Plug-based Web Applications",
        stars=51,
        forks=7,
        language="Elixir",
        topics=["elixir", "authentication"],
        url="https://github.com/beam-community/ueberauth",
        homepage="https://hex.pm/packages/ueberauth",
        is_featured=False,
    ),
    ProjectRecord(
        name="elixirschool",
        description="The premier destination for people looking to learn and master the Elixir programming language",
        stars=16,
        forks=4,
        language="Elixir",
        topics=["elixir", "education"],
        url="https://github.com/beam-community/elixirschool",
        homepage="https://elixirschool.com",
        is_featured=False,
    ),
]

# Only member_count and total_downloads are ever substituted into a live snapshot
FALLBACK_STATS = OrgStatsSnapshot(
    total_stars=7900,
    total_forks=1400,
    project_count=15,
    total_downloads=None,
    member_count=21,
)


def fallback_projects() -> List[ProjectRecord]:
    """Fresh copies of the fallback list so callers can't mutate the constants."""
    return [project.model_copy(deep=True) for project in FALLBACK_PROJECTS]
