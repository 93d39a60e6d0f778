"""Operator command line for Topic Store.

Commands:
    publish TOPIC FILE        Append the JSON document in FILE ("-" for stdin)
    replay TOPIC              Print every readable event as one JSON line
    configuration             Print the topic-lifecycle log

Usage:
    python -m topic_store replay payments
    python -m topic_store replay payments --show-skipped
    echo '{"amount": 10}' | python -m topic_store publish payments -

With TOPIC_STORE_BACKEND=memory every command runs against its own empty
in-memory store, so a replay never sees what an earlier publish wrote.

Configuration is read from the environment (and a .env file, if present);
see topic_store.config.TopicStoreConfig.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from dotenv import load_dotenv

from topic_store.bootstrap.logging import configure_structlog
from topic_store.bootstrap.topic_store import TopicStoreContainer, open_topic_store
from topic_store.config.topic_store_config import TopicStoreConfig
from topic_store.domain.errors.storage import StorageError
from topic_store.domain.events.topic_created import CONFIGURATION_TOPIC, TopicCreated
from topic_store.domain.models.read_outcome import ReadStatus
from topic_store.infrastructure.observability import (
    generate_correlation_id,
    set_correlation_id,
)

EXIT_OK = 0
EXIT_STORAGE_ERROR = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="topic_store",
        description="Publish to and replay Topic Store topics.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    publish = subparsers.add_parser("publish", help="Append a JSON event to a topic")
    publish.add_argument("topic", help="Topic name")
    publish.add_argument("file", help="Path to a JSON document, or - for stdin")

    replay = subparsers.add_parser("replay", help="Print all events of a topic")
    replay.add_argument("topic", help="Topic name")
    replay.add_argument(
        "--show-skipped",
        action="store_true",
        help="Also report objects that could not be read",
    )

    subparsers.add_parser("configuration", help="Print the topic-lifecycle log")
    return parser


def _load_document(source: str, stdin: TextIO) -> Any:
    if source == "-":
        return json.load(stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


async def _publish(store: TopicStoreContainer, topic: str, document: Any, out: TextIO) -> None:
    object_name = await store.publisher.publish(topic, document)
    print(object_name, file=out)


async def _replay(
    store: TopicStoreContainer, topic: str, show_skipped: bool, out: TextIO
) -> None:
    async for outcome in store.reader.read_outcomes(topic):
        if outcome.status is ReadStatus.KEPT:
            print(json.dumps(outcome.value, ensure_ascii=False), file=out)
        elif show_skipped:
            print(f"# skipped {outcome.object_name}: {outcome.reason}", file=out)


async def _configuration(store: TopicStoreContainer, out: TextIO) -> None:
    async for event in store.reader.read_as(CONFIGURATION_TOPIC, TopicCreated):
        event_types = ",".join(schema.event_type for schema in event.event_schemas)
        print(
            f"{event.created_at.isoformat()}\t{event.topic_name}\t"
            f"v{event.version}\t{event_types}",
            file=out,
        )


async def run(
    args: argparse.Namespace,
    config: TopicStoreConfig,
    *,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """Execute a parsed command against a freshly opened store."""
    if stdin is None:
        stdin = sys.stdin
    if out is None:
        out = sys.stdout
    set_correlation_id(generate_correlation_id())
    document: Any = None
    if args.command == "publish":
        try:
            document = _load_document(args.file, stdin)
        except (OSError, json.JSONDecodeError) as e:
            print(f"error: cannot read JSON document: {e}", file=sys.stderr)
            return EXIT_USAGE_ERROR

    try:
        async with open_topic_store(config) as store:
            if args.command == "publish":
                await _publish(store, args.topic, document, out)
            elif args.command == "replay":
                await _replay(store, args.topic, args.show_skipped, out)
            else:
                await _configuration(store, out)
    except StorageError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_STORAGE_ERROR
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``python -m topic_store``."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        config = TopicStoreConfig.from_environment()
    except ValueError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    configure_structlog(config.environment, stream=sys.stderr)
    return asyncio.run(run(args, config))
