"""Output schemas for navigate commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class NavigateOpenOutput(BaseOutputSchema):
    """Output schema for navigate open command."""

    token: str = Field(..., description="Raw wikilink content under the cursor, empty string if none")
    reference: str = Field(..., description="Sanitized reference, empty string if none")
    kind: str = Field(..., description="Target kind: note, image, audio, or empty string")
    state: str = Field(..., description="Final resolver state")
    candidates: list[str] = Field(..., description="Candidate paths returned by the index or file search")
    target: str = Field(..., description="Resolved target path, empty string if nothing was resolved")
    action: str = Field(..., description="Action taken: open, view, play, or none")


class NavigateBacklinksOutput(BaseOutputSchema):
    """Output schema for navigate backlinks command."""

    fragment: str = Field(..., description="Path fragment matched against backlink targets")
    candidates: list[str] = Field(..., description="Files linking to the fragment")
    target: str = Field(..., description="Chosen file (vault root + relative path), empty string if none")


class NavigateTagsOutput(BaseOutputSchema):
    """Output schema for navigate tags command."""

    tag: str = Field(..., description="Chosen tag, empty string if none")
    tags: list[str] = Field(..., description="All tags offered for picking, empty when a tag was given")
    candidates: list[str] = Field(..., description="Files carrying the chosen tag")
    target: str = Field(..., description="Chosen file (vault root + relative path), empty string if none")


register_output_schema("navigate", "open", NavigateOpenOutput)
register_output_schema("navigate", "backlinks", NavigateBacklinksOutput)
register_output_schema("navigate", "tags", NavigateTagsOutput)
