"""
Pydantic models for the generated slide deck.

Wire names are camelCase (``imageQuery``, ``imageUrl``) to match what the
browser page and the model prompt use; Python code works with snake_case
attributes.
"""

from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

Theme = Literal["black", "white", "league", "beige", "night", "serif", "simple", "solarized"]
Ratio = Literal["16:9", "4:3"]

THEMES: tuple[str, ...] = get_args(Theme)
RATIOS: tuple[str, ...] = get_args(Ratio)

DEFAULT_THEME: Theme = "night"
DEFAULT_RATIO: Ratio = "16:9"


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Slide(_CamelModel):
    title: str | None = None
    subtitle: str | None = None
    bullets: list[str] | None = None
    image_query: str | None = Field(None, alias="imageQuery")
    notes: str | None = None
    image_url: str | None = Field(None, alias="imageUrl")

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the wire: absent fields omitted, ``imageUrl`` always present."""
        payload = self.model_dump(by_alias=True, exclude_none=True, exclude={"image_url"})
        payload["imageUrl"] = self.image_url
        return payload


class Deck(_CamelModel):
    theme: Theme = DEFAULT_THEME
    ratio: Ratio = DEFAULT_RATIO
    slides: list[Slide] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "theme": self.theme,
            "ratio": self.ratio,
            "slides": [s.to_payload() for s in self.slides],
        }


class RenderedDeck(_CamelModel):
    html: str
    theme_href: str = Field(alias="themeHref")
    options: dict[str, Any]
