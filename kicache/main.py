"""Command entry point: wires Redis, the external API and the HTTP server."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import redis
from flask import Flask

from .client import DragonBallClient
from .handler import create_app
from .redis_repository import RedisRepository
from .service import CharacterService

DEFAULT_REDIS_URL = "redis://op-redis:6379/0"

log = logging.getLogger(__name__)


def build_app(redis_url: str = DEFAULT_REDIS_URL) -> Flask:
    """Build the web app; its Redis client is kept in ``app.extensions['redis']``."""
    client = redis.Redis.from_url(redis_url)
    service = CharacterService(RedisRepository(client), DragonBallClient())
    app = create_app(service)
    app.extensions["redis"] = client
    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the character API server."""
    parser = argparse.ArgumentParser(description="Character lookup API with a Redis cache.")
    parser.add_argument("--redis-url", default=DEFAULT_REDIS_URL)
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    app = build_app(args.redis_url)
    log.info("API running on :%d", args.port)
    try:
        app.run(host=args.host, port=args.port)
    finally:
        app.extensions["redis"].close()
    return 0