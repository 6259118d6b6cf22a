"""
List posts from either storage backend.

Run:
  python -m post_store in-memory
  python -m post_store file --path db.json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from post_store.errors import RepositoryError
from post_store.settings import create_repository, get_settings
from post_store.store import StoreRepository


async def show_posts(repo: StoreRepository) -> None:
    """Print all posts, then the first one looked up by id"""
    posts = await repo.get_all_posts()
    print(json.dumps([post.model_dump(mode="json") for post in posts], indent=2))

    if posts:
        post = await repo.get_post_by_id(posts[0].id)
        if post is not None:
            print(post.model_dump_json(indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="post_store", description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "backend",
        nargs="?",
        choices=["in-memory", "file"],
        help="storage backend (defaults to POST_STORE_BACKEND)",
    )
    parser.add_argument("--path", help="JSON file for the file backend")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.path:
        overrides["file_path"] = Path(args.path)
    if overrides:
        settings = settings.model_copy(update=overrides)

    logging.basicConfig(level=settings.log_level.upper())

    repo = create_repository(settings)
    try:
        asyncio.run(show_posts(repo))
    except RepositoryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
