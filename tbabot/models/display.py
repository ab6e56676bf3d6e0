from typing import List, Optional

import discord
from pydantic import BaseModel, Field

# Discord embed limits
TITLE_LIMIT = 256
DESCRIPTION_LIMIT = 4096
FIELD_NAME_LIMIT = 256
FIELD_VALUE_LIMIT = 1024
EMBED_TOTAL_LIMIT = 6000

ELLIPSIS = "…"


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: max(limit - len(ELLIPSIS), 0)] + ELLIPSIS


class DisplayField(BaseModel):
    name: str
    value: str
    inline: bool = True


class Display(BaseModel):
    """Content of a single embed reply."""

    title: str
    description: Optional[str] = None
    fields: List[DisplayField] = Field(default_factory=list)
    thumbnail_url: Optional[str] = None
    url: Optional[str] = None

    def to_embed(self) -> discord.Embed:
        """Build the embed, cutting text that would exceed Discord's limits."""
        title = truncate(self.title, TITLE_LIMIT)
        description = truncate(self.description, DESCRIPTION_LIMIT) if self.description else self.description
        names = [truncate(field.name, FIELD_NAME_LIMIT) for field in self.fields]

        # Field values share whatever is left of the total budget
        value_limit = FIELD_VALUE_LIMIT
        if self.fields:
            left = EMBED_TOTAL_LIMIT - len(title) - len(description or "") - sum(len(n) for n in names)
            value_limit = max(min(FIELD_VALUE_LIMIT, left // len(self.fields)), 1)

        embed = discord.Embed(title=title, description=description, url=self.url)
        for name, field in zip(names, self.fields):
            embed.add_field(name=name, value=truncate(field.value, value_limit), inline=field.inline)
        if self.thumbnail_url:
            embed.set_thumbnail(url=self.thumbnail_url)
        return embed
