from __future__ import annotations

import argparse
import json
from typing import List, Optional

from sqlmodel import Session

from .builders import build_spell, parse_spell_source
from .db import make_engine
from .http import HTTP_TIMEOUT, SPELLS_API_BASE_URL, build_client, get_json
from .logging_config import configure_logging
from .spells import DEFAULT_SPELL_INDEXES, run_seed, spell_url


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed the spells table from the public spell API")
    parser.add_argument("--api-base-url", default=SPELLS_API_BASE_URL, help="Spell endpoint base URL")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy URL (defaults to DATABASE_URL env)")
    parser.add_argument(
        "--spell",
        dest="spells",
        action="append",
        metavar="INDEX",
        help="Spell index to import (repeatable, replaces the default list)",
    )
    parser.add_argument("--timeout", type=float, default=HTTP_TIMEOUT, help="HTTP timeout in seconds")
    parser.add_argument("--dry-run", action="store_true", help="Fetch and validate only, do not write")
    return parser


def _dry_run(spell_indexes: List[str], base_url: str, timeout: float) -> None:
    with build_client(timeout) as client:
        for idx, index in enumerate(spell_indexes, 1):
            spell = build_spell(parse_spell_source(get_json(client, spell_url(base_url, index)), index=index))
            body = json.dumps(spell.model_dump(exclude={"id"}), ensure_ascii=False)
            print(f"[{idx}/{len(spell_indexes)}] {body[:500]}" + ("..." if len(body) > 500 else ""))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    spell_indexes = args.spells or list(DEFAULT_SPELL_INDEXES)
    if args.dry_run:
        _dry_run(spell_indexes, args.api_base_url, args.timeout)
        print("[dry-run] Nothing written")
        return 0

    engine = make_engine(args.database_url)
    try:
        with Session(engine) as session, build_client(args.timeout) as client:
            run_seed(session, spell_indexes, client=client, base_url=args.api_base_url)
    finally:
        engine.dispose()
    return 0
