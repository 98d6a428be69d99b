"""Output schemas for vault commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class VaultDailyOutput(BaseOutputSchema):
    """Output schema for vault daily command."""

    date: str = Field(..., description="Date of the daily note (YYYY-MM-DD)")
    path: str = Field(..., description="Path of the daily note")
    exists: bool = Field(..., description="Whether the daily note already exists")


class VaultTemplateOutput(BaseOutputSchema):
    """Output schema for vault template command."""

    note: str = Field(..., description="Note the template was applied to")
    template: str = Field(..., description="Template file used")
    title: str = Field(..., description="Value substituted for {{title}}")
    written: bool = Field(..., description="Whether the note was written")


register_output_schema("vault", "daily", VaultDailyOutput)
register_output_schema("vault", "template", VaultTemplateOutput)
