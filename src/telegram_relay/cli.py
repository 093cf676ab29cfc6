"""Command-line interface for the Telegram relay."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import Config, load_config
from .core import Event, MessageSender, PayloadResolver
from .dispatcher import EventDispatcher
from .errors import ConfigError
from .providers import ConfigValueResolver, HttpContentFetcher
from .transport import TelegramHttpClient


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Telegram Relay - Send notification events to a Telegram chat",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -c config.yaml events.json     # Relay events from a file
  cat events.json | %(prog)s -c config.yaml
  %(prog)s -c config.yaml --split events.json
  %(prog)s --token 123:abc --list-chats   # Find your chat id
""",
    )

    parser.add_argument(
        "events",
        nargs="?",
        default="-",
        metavar="EVENTS",
        help="JSON file with a list of events ('-' for stdin)",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--token",
        metavar="TOKEN",
        help="Bot auth token (overrides config)",
    )

    parser.add_argument(
        "--chat-id",
        metavar="ID",
        help="Destination chat id (overrides config)",
    )

    parser.add_argument(
        "--split",
        action="store_true",
        help="Split long messages instead of truncating them",
    )

    parser.add_argument(
        "--list-chats",
        action="store_true",
        help="List chats the bot has seen and exit",
    )

    return parser.parse_args(argv)


def load_events(source: str) -> list[Event]:
    """
    Load events from a JSON file or stdin.

    The document is a list whose items are either {"id": ..., "payload":
    {...}} or a bare payload object (its list index becomes the id).

    Args:
        source: File path, or "-" for stdin.

    Returns:
        List of Event objects.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the document isn't a list of objects.
    """
    if source == "-":
        data = json.load(sys.stdin)
    else:
        with open(Path(source)) as f:
            data = json.load(f)

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError("Events must be a JSON list")

    events = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Event {i} is not an object")
        if "payload" in item and isinstance(item["payload"], dict):
            events.append(Event(id=item.get("id", i), payload=item["payload"]))
        else:
            events.append(Event(id=i, payload=item))
    return events


def build_dispatcher(config: Config, client: TelegramHttpClient) -> EventDispatcher:
    """Wire the dispatcher and its collaborators from config."""
    values = ConfigValueResolver(config)
    fetcher = HttpContentFetcher(timeout=config.download_timeout_seconds)
    return EventDispatcher(
        resolver=PayloadResolver(fetcher),
        sender=MessageSender(client, values),
        values=values,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.token:
        config = replace(config, auth_token=args.token)
    if args.chat_id:
        config = replace(config, chat_id=args.chat_id)
    if args.split:
        config = replace(config, long_message="split")

    client = TelegramHttpClient(
        auth_token=config.auth_token or "",
        api_url=config.api_url,
        timeout=config.request_timeout_seconds,
    )

    if args.list_chats:
        if not config.auth_token:
            logger.error("auth_token is required")
            return 1
        try:
            chats = client.list_chats()
        except Exception as e:
            logger.error(f"Failed to list chats: {e}")
            return 1
        for chat in chats:
            print(f"{chat['id']}\t{chat['text']}")
        return 0

    try:
        config.validate()
    except ConfigError as e:
        logger.error(str(e))
        return 1

    try:
        events = load_events(args.events)
    except FileNotFoundError:
        logger.error(f"Events file not found: {args.events}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid events: {e}")
        return 1

    logger.info(f"Relaying {len(events)} event(s) to chat {config.chat_id}")
    dispatcher = build_dispatcher(config, client)
    results = dispatcher.process(events)

    failed = [r.event_id for r in results if not r.ok]
    if failed:
        logger.warning(f"{len(failed)} event(s) had no sendable field: {', '.join(failed)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
