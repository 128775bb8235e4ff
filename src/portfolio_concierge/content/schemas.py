"""
Portfolio Content Schemas

These Pydantic models define the INPUT CONTRACT for the concierge: everything
the chatbot knows about the portfolio owner comes from one PortfolioContent
record. The record is frozen, so the index built from it can never drift
from the content it was built from.

JSON files may use either the snake_case field names or the camelCase
names of the original site data (`resumeURL`).
"""

from pydantic import BaseModel, ConfigDict, Field

UNSET_URL = "#"


class WorkItem(BaseModel):
    """
    One portfolio piece (a graphics series or a video).

    Only id, title, description and tags feed the retrieval index.
    The remaining fields are presentation data carried through for the UI.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Stable identifier, also the document id")
    title: str = Field(description="Display title, used in answer labels")
    description: str = Field(default="", description="Free-text description")
    tags: tuple[str, ...] = Field(default=(), description="Keywords for retrieval")

    thumbnail: str | None = None
    images: tuple[str, ...] = ()
    url: str | None = None


class About(BaseModel):
    """Bio section."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    image: str | None = None


class Works(BaseModel):
    """Portfolio pieces grouped by medium, in display order."""

    model_config = ConfigDict(frozen=True)

    graphics: tuple[WorkItem, ...] = ()
    video: tuple[WorkItem, ...] = ()


class PortfolioContent(BaseModel):
    """
    The complete content snapshot the concierge answers from.

    resume_url of "#" (or empty) means no resume has been published yet.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    roles: tuple[str, ...] = ()
    about: About = About()
    works: Works = Works()
    email: str = ""
    whatsapp: str = ""
    resume_url: str = Field(default=UNSET_URL, alias="resumeURL")
    socials: dict[str, str] = Field(default_factory=dict)

    @property
    def has_resume(self) -> bool:
        return bool(self.resume_url) and self.resume_url != UNSET_URL

    def find_graphics(self, item_id: str) -> WorkItem | None:
        return next((g for g in self.works.graphics if g.id == item_id), None)

    def find_video(self, item_id: str) -> WorkItem | None:
        return next((v for v in self.works.video if v.id == item_id), None)
