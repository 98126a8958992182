# ============================================================================
# KubeNotify - Command Line Interface
#
# Purpose: CLI entry point for sending events through the configured notifier
# Inputs: Command-line arguments, YAML config, event JSON
# Outputs: Events indexed in Elasticsearch/OpenSearch
# Dependencies: argparse, config, notify
# Usage: kubenotify send-event --config config.yaml --event event.json
#
# Changelog:
#   2026-10-07: Initial CLI with send-event and send-message commands
#   2026-10-12: Added index-name command to print the day's target index
# ============================================================================

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from KubeNotify import __version__
from KubeNotify.config import Config
from KubeNotify.errors import ConfigurationError, KubeNotifyError
from KubeNotify.logging_utils import get_logger, setup_logging
from KubeNotify.notify.elasticsearch import ElasticSearchNotifier, partition_index_name
from KubeNotify.utils.serialization import deserialize_event_from_json
from KubeNotify.utils.time import local_now

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="kubenotify",
        description="Forward Kubernetes cluster events to Elasticsearch/OpenSearch",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override logging.level from the config file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    event_parser = subparsers.add_parser("send-event", help="Send one event read from a JSON file")
    event_parser.add_argument(
        "--event",
        type=str,
        required=True,
        help="Path to an event JSON object, or '-' to read from stdin",
    )

    message_parser = subparsers.add_parser("send-message", help="Send a free-text message")
    message_parser.add_argument("--text", type=str, required=True, help="Message text")

    index_parser = subparsers.add_parser("index-name", help="Print the index an event would be written to")
    index_parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Date to compute the index for, YYYY-MM-DD (default: today)",
    )

    return parser


def _load_config(args: argparse.Namespace) -> Config:
    config = Config.from_yaml(args.config) if args.config else Config.from_default()
    setup_logging(args.log_level or config.logging.level, config.logging.format)
    return config


def _read_event_json(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise ConfigurationError(f"Event file not found: {source}")
    return path.read_text(encoding="utf-8")


def send_event_command(args: argparse.Namespace) -> int:
    """
    Load an event from JSON and send it through the Elasticsearch notifier.

    Returns:
        Exit code (0 success, 1 known error, 2 unexpected error)
    """
    try:
        config = _load_config(args)
        try:
            event = deserialize_event_from_json(_read_event_json(args.event))
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Event is not a valid event JSON object: {args.event}", details=str(e)) from e

        notifier = ElasticSearchNotifier.from_config(config)
        index = notifier.send_event(event)

        print(f"✓ Event sent to index {index}")
        return 0

    except (KubeNotifyError, FileNotFoundError) as e:
        logger.error(f"Send error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error while sending event")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2


def send_message_command(args: argparse.Namespace) -> int:
    """
    Send a free-text message through the Elasticsearch notifier.

    Returns:
        Exit code (0 success, 1 known error, 2 unexpected error)
    """
    try:
        config = _load_config(args)
        notifier = ElasticSearchNotifier.from_config(config)
        notifier.send_message(args.text)
        print("✓ Message accepted (Elasticsearch notifier does not index free-text messages)")
        return 0

    except (KubeNotifyError, FileNotFoundError) as e:
        logger.error(f"Send error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error while sending message")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2


def index_name_command(args: argparse.Namespace) -> int:
    """
    Print the index name for today (or --date) without contacting the backend.

    Returns:
        Exit code
    """
    try:
        config = _load_config(args)
        moment = local_now()
        if args.date:
            try:
                moment = datetime.strptime(args.date, "%Y-%m-%d")
            except ValueError as e:
                raise ConfigurationError(f"Invalid --date {args.date!r}, expected YYYY-MM-DD") from e

        print(partition_index_name(config.elasticsearch.index.name, moment))
        return 0

    except (KubeNotifyError, FileNotFoundError) as e:
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "send-event":
        return send_event_command(args)
    if args.command == "send-message":
        return send_message_command(args)
    if args.command == "index-name":
        return index_name_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
