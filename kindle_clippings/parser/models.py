from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EntryKind(str, Enum):
    """Kind of clipping recorded by the device."""

    HIGHLIGHT = "Highlight"
    NOTE = "Note"
    BOOKMARK = "Bookmark"

    def __str__(self) -> str:
        return self.value


class Location(BaseModel):
    """Inclusive location range inside a book. A single location has start == end."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0, description="First location of the range")
    end: int = Field(ge=0, description="Last location of the range")

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"


class Entry(BaseModel):
    """Represents a single Kindle clipping (highlight, note, or bookmark)."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1, description="The title of the book")
    author: str = Field(description="The author of the book, empty if the device left it blank")
    kind: EntryKind = Field(description="Type of clipping")
    page: int | None = Field(default=None, ge=0, description="Printed page number, if the book has pagination")
    location: Location = Field(description="Location range from the Kindle")
    creation_date: datetime = Field(description="Date when the clipping was created")
    text: str = Field(default="", description="Content of the clipping, empty for bookmarks")

    def __str__(self) -> str:
        page = self.page if self.page is not None else "-"
        return (
            f"{self.kind} ({self.creation_date}) in {self.author}: {self.title} - "
            f"page: {page} location: {self.location}, text: {self.text}"
        )
