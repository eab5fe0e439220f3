"""Carga los datos semilla (users, folders, tags, notes) en la base configurada.

Uso típico:
  PYTHONPATH=. python scripts/seed.py            # dry-run: muestra qué se insertaría
  PYTHONPATH=. python scripts/seed.py --drop --yes

Características:
  - Con --drop borra antes las colecciones semilla (user, folder, tag, note).
  - Crea índices y validadores (igual que el startup de la API).
  - Dry-run por defecto. Confirma con --yes.
"""
from __future__ import annotations

import argparse
import asyncio
import logging

from app.core.config import settings
from app.core.logging import setup_logging
from app.infrastructure.db.bootstrap import ensure_collections
from app.infrastructure.db.mongo import close_mongo, get_db, init_mongo
from app.infrastructure.db.seed_data import SEED_FILES, drop_seeded, load_seed, seed_database

_log = logging.getLogger("noteful.scripts.seed")


async def _run(drop: bool, yes: bool) -> int:
    if not yes:
        for filename, collection in SEED_FILES:
            print(f"[dry-run] {collection}: {len(load_seed(filename))} documentos")
        print(f"[dry-run] db={settings.mongo_db} drop={drop}. Usa --yes para aplicar.")
        return 0

    if not await init_mongo():
        _log.error("Mongo no accesible en %s", settings.mongo_uri)
        return 1
    try:
        db = get_db()
        if drop:
            await drop_seeded(db)
        await ensure_collections(db)
        counts = await seed_database(db)
        for collection, n in counts.items():
            print(f"{collection}: {n}")
        return 0
    finally:
        close_mongo()


def main() -> int:
    ap = argparse.ArgumentParser(description="Carga datos semilla en Mongo")
    ap.add_argument("--drop", action="store_true", help="Borra las colecciones semilla antes de insertar")
    ap.add_argument("--yes", action="store_true", help="Aplica cambios (sin esto es dry-run)")
    args = ap.parse_args()
    setup_logging(settings.log_level)
    return asyncio.run(_run(args.drop, args.yes))


if __name__ == "__main__":
    raise SystemExit(main())
