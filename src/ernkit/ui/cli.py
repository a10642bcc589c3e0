# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from ernkit.adapters.catalog import load_release_document
from ernkit.adapters.memory import InMemoryDeliveryHistory, InMemoryReleaseRepository
from ernkit.app import generate_release_ern
from ernkit.config import configure_logging
from ernkit.domain.errors import PreconditionViolation
from ernkit.domain.model import (
    DeliveryRecord,
    DeliveryStatus,
    DeliveryTarget,
    ErnVersion,
    MessageSubType,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from ernkit.domain.generation import GenerationResult

log = logging.getLogger(__name__)

DEFAULT_RECIPIENT_ID = "recipient"
DEFAULT_RECIPIENT_NAME = "Recipient"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate DDEX ERN messages")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate an ERN message for a release")
    generate.add_argument(
        "release_json",
        type=Path,
        metavar="RELEASE_JSON",
        help="Path to a catalog release document",
    )
    generate.add_argument(
        "--version",
        dest="ern_version",
        type=str,
        help="ERN version (3.8.2, 4.2 or 4.3; defaults to ERN_DEFAULT_VERSION)",
    )
    generate.add_argument(
        "--recipient-id",
        type=str,
        help="DDEX party id of the recipient",
    )
    generate.add_argument(
        "--recipient-name",
        type=str,
        help="Name of the recipient (default: %(default)s)",
        default=DEFAULT_RECIPIENT_NAME,
    )
    mode = generate.add_mutually_exclusive_group()
    mode.add_argument(
        "--takedown",
        action="store_true",
        help="Generate a takedown message without deals",
    )
    mode.add_argument(
        "--update",
        action="store_true",
        help="Treat the release as already delivered to the recipient",
    )
    generate.add_argument(
        "--test",
        action="store_true",
        help="Mark the message as a TestMessage",
    )
    generate.add_argument(
        "--output",
        type=Path,
        help="Write the XML to this file instead of stdout",
    )

    return parser.parse_args(list(argv))


def _build_target(args: argparse.Namespace) -> DeliveryTarget:
    version = ErnVersion.parse(args.ern_version) if args.ern_version else None
    return DeliveryTarget(
        id=args.recipient_id or DEFAULT_RECIPIENT_ID,
        name=args.recipient_name,
        party_id=args.recipient_id,
        ern_version=version,
        test_mode=args.test,
    )


def _generate(args: argparse.Namespace, target: DeliveryTarget) -> GenerationResult:
    release = load_release_document(args.release_json)
    history = InMemoryDeliveryHistory()
    if args.update:
        history.record(
            DeliveryRecord(
                release_id=release.id,
                target_id=target.id,
                status=DeliveryStatus.COMPLETED,
                message_sub_type=MessageSubType.INITIAL,
            )
        )
    return generate_release_ern(
        release.id,
        target,
        releases=InMemoryReleaseRepository([release]),
        history=history,
        takedown=args.takedown,
    )


def _emit(result: GenerationResult, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(result.xml)
    else:
        output.write_text(result.xml, encoding="utf-8")
        log.info("Wrote message %s to %s", result.message_id, output)
    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        target = _build_target(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        result = _generate(parsed_args, target)
        _emit(result, parsed_args.output)
    except (ValueError, PreconditionViolation) as exc:
        log.error("Cannot generate message: %s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during generation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load `.env`, install the SIGINT handler, run."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
