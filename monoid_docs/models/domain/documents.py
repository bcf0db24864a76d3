"""Organization, document and repository domain models."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class Organization(BaseModel):
    """An organization owning published documentation."""

    id: str
    name: str
    slug: str = Field(description="Unique, URL-safe lookup key")


class Repository(BaseModel):
    """A code repository a document may reference."""

    id: str
    name: str
    owner: str

    @property
    def label(self) -> str:
        """Human-readable ``owner/name`` label."""
        return f"{self.owner}/{self.name}"


class Document(BaseModel):
    """A documentation page belonging to one organization."""

    id: str | None = None
    organization_id: str
    slug: str
    title: str
    description: str | None = None
    content: str = Field(default="", description="Inline content; a stored blob overrides it")
    is_published: bool = False
    order_index: int = 0
    repo_id: str | None = None
    created_at: datetime | None = None

    @field_validator("content", mode="before")
    @classmethod
    def empty_content(cls, v):
        """Store rows may carry NULL content."""
        return v if v is not None else ""


__all__ = ["Organization", "Repository", "Document"]
