from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, Field, ValidationError

from shared_models import Spell


class ShapeError(ValueError):
    """A spell API response is missing a required field or has the wrong type."""

    def __init__(self, index: Optional[str], errors: List[str]) -> None:
        self.index = index
        self.errors = errors
        where = f" for {index!r}" if index else ""
        super().__init__(f"Unexpected spell payload{where}: {'; '.join(errors)}")


class SpellSource(PydanticBaseModel):
    """The part of a spell API response the seeder consumes."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str
    level: int
    desc: List[str] = Field(min_length=1)


def parse_spell_source(data: Any, index: Optional[str] = None) -> SpellSource:
    if not isinstance(data, dict):
        raise ShapeError(index, [f"expected a JSON object, got {type(data).__name__}"])
    try:
        return SpellSource.model_validate(data)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise ShapeError(index, errors) from exc


def build_spell(source: SpellSource) -> Spell:
    # Only the first paragraph of `desc` is stored
    return Spell(name=source.name, level=source.level, description=source.desc[0])
