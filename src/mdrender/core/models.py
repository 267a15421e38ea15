"""Data models for render results and document outlines"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class HeadingRecord:
    """One heading as reported during render; not persisted."""
    text:  str      # plain text, footnote markers removed
    level: int      # 1-6
    html:  str      # isolated <hN>...</hN> fragment


@dataclass
class RenderResult:
    """Final HTML for one document."""
    html: str


class TocEntry(BaseModel):
    """A node in the nested table of contents."""
    level: int = Field(ge=1, le=6)
    text: str
    html: str
    children: list["TocEntry"] = Field(default_factory=list)


class RenderedFile(BaseModel):
    """Outcome of rendering one source file in a batch run."""
    source: str
    destination: str
    status: str                     # written | overwritten | skipped
    toc: Optional[str] = None       # path of the outline JSON, if written
