"""One-shot script: write a provider's saved templates to a dated JSON file."""
from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

import redis.asyncio as aioredis

from appointease.application.ports.clock import SystemClock
from appointease.config import settings
from appointease.infrastructure.storage.redis_templates import RedisTemplateStore
from appointease.services import template_service

logger = logging.getLogger(__name__)


async def export(user_id: str, out_dir: Path) -> Path:
    r = aioredis.from_url(settings.REDIS_URL, decode_responses=True)
    try:
        store = RedisTemplateStore(r, settings.TEMPLATES_KEY_PREFIX)
        templates = await template_service.load_templates(store, user_id)
    finally:
        await r.aclose()

    path = out_dir / template_service.export_filename(SystemClock().today())
    path.write_text(template_service.export_templates(templates), encoding="utf-8")
    logger.info("Exported %d templates for %s to %s", len(templates), user_id, path)
    return path


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("user_id")
    parser.add_argument("--out-dir", type=Path, default=Path("."))
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    asyncio.run(export(args.user_id, args.out_dir))


if __name__ == "__main__":
    main()
