"""Data models shared by the aggregator and the page builder."""

from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


class ProjectRecord(BaseModel):
    """A repository of the org as shown on the site"""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    stars: int = Field(ge=0, description="Stargazer count")
    forks: int = Field(ge=0, description="Fork count")
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    url: str
    homepage: Optional[str] = None
    is_featured: bool = False


class OrgStatsSnapshot(BaseModel):
    """Org-wide totals derived from a project list"""

    total_stars: int
    total_forks: int
    project_count: int
    total_downloads: Optional[int] = None
    member_count: Optional[int] = None


class GitHubRepo(BaseModel):
    """One entry of the GitHub org repos listing.

    Only the fields the site needs are validated; anything else in the
    payload is ignored.
    """

    name: str
    description: Optional[str] = None
    stargazers_count: int = Field(ge=0)
    forks_count: int = Field(ge=0)
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    html_url: str
    homepage: Optional[str] = None
    archived: bool = False

    @field_validator("topics", mode="before")
    @classmethod
    def _null_topics(cls, value):
        return [] if value is None else value

    @field_validator("archived", mode="before")
    @classmethod
    def _null_archived(cls, value):
        return False if value is None else value

    def to_project(self) -> ProjectRecord:
        return ProjectRecord(
            name=self.name,
            description=self.description or "",
            stars=self.stargazers_count,
            forks=self.forks_count,
            language=self.language,
            topics=list(self.topics),
            url=self.html_url,
            # GitHub returns "" for repos without a homepage
            homepage=self.homepage or None,
            is_featured=False,
        )


class SiteData(BaseModel):
    """Everything the page template needs from the aggregator"""

    projects: List[ProjectRecord]
    stats: OrgStatsSnapshot
    from_fallback: bool = False
