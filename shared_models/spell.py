from typing import Optional

from pydantic import ConfigDict
from sqlmodel import Field, SQLModel


class Spell(SQLModel, table=True):
    """Spell seeded from the remote spell API."""

    __tablename__ = "spells"

    model_config = ConfigDict(extra="forbid")

    id: Optional[int] = Field(default=None, primary_key=True)
    name: Optional[str] = Field(default=None)
    level: Optional[int] = Field(default=None)
    # Only the first paragraph of the source `desc` list is stored
    description: Optional[str] = Field(default=None)
