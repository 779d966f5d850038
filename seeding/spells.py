from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx
from sqlmodel import Session

from .builders import build_spell, parse_spell_source
from .http import SPELLS_API_BASE_URL, build_client, get_json

DEFAULT_SPELL_INDEXES: tuple[str, ...] = (
    "acid-arrow",
    "animal-messenger",
    "calm-emotions",
    "charm-person",
)
logger = logging.getLogger(__name__)


def spell_url(base_url: str, index: str) -> str:
    return f"{base_url.rstrip('/')}/{index}"


def run_seed(
    session: Session,
    spell_indexes: Sequence[str] = DEFAULT_SPELL_INDEXES,
    *,
    client: Optional[httpx.Client] = None,
    base_url: str = SPELLS_API_BASE_URL,
) -> None:
    """Fetch each spell from the API and insert one `Spell` row per index.

    Rows are committed one at a time in list order. Any failure aborts the run
    and propagates, leaving the rows committed before it in place.
    """
    owns_client = client is None
    http = build_client() if client is None else client
    try:
        logger.info("Seeding spells...")
        for position, index in enumerate(spell_indexes, 1):
            data = get_json(http, spell_url(base_url, index))
            spell = build_spell(parse_spell_source(data, index=index))
            session.add(spell)
            session.commit()
            logger.debug(
                "Created spell",
                extra={"position": position, "total": len(spell_indexes), "spell_index": index, "spell_id": spell.id},
            )
        logger.info("Done seeding!")
    finally:
        if owns_client:
            http.close()
