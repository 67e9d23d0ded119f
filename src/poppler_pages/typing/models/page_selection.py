"""Page selector models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class AllPages(BaseModel):
    """Select every page of the document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["all"] = "all"


class PageRange(BaseModel):
    """Select an inclusive range of pages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["range"] = "range"
    low: int = Field(ge=0)
    high: int = Field(ge=0)


class SpecificPages(BaseModel):
    """Select explicit pages, in the given order, duplicates included."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["specific"] = "specific"
    pages: tuple[Annotated[int, Field(ge=0)], ...]


PageSelector = Annotated[AllPages | PageRange | SpecificPages, Field(discriminator="kind")]
