import argparse
import asyncio
from collections.abc import Sequence
from pathlib import Path

from medisummarize.config.settings import Settings
from medisummarize.extraction.models import SourceFile
from medisummarize.logging.logger import Log
from medisummarize.session.controller import ReportController, build_controller
from medisummarize.session.models import ReportStatus
from medisummarize.session.notifications import Notification


def _print_notification(notification: Notification) -> None:
    print(f"[{notification.level.value}] {notification.title}: {notification.description}")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="medisummarize",
        description="Summarize a medical report and ask questions about it.",
    )
    parser.add_argument("report", type=Path, help="Report file (.txt, .pdf or image)")
    parser.add_argument("--mime-type", help="Override the MIME type guessed from the name")
    parser.add_argument("--summarize", action="store_true", help="Print a summary")
    parser.add_argument(
        "--ask",
        action="append",
        default=[],
        metavar="QUESTION",
        help="Question about the report; may be repeated",
    )
    return parser.parse_args(argv)


async def run(controller: ReportController, args: argparse.Namespace) -> int:
    """Upload the report, then run the requested operations in order."""
    source = SourceFile.from_path(args.report, mime_type=args.mime_type)
    state = await controller.upload(source)
    if state.report.status is not ReportStatus.READY:
        return 1

    if args.summarize:
        state = await controller.summarize()
        if state.summary is not None:
            print(f"\nSummary:\n{state.summary.summary}")

    for question in args.ask:
        await controller.ask(question)

    for message in controller.state.transcript:
        print(f"\n{message.sender.value}: {message.text}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> controller -> run."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    controller = build_controller(settings, notifier=_print_notification)
    return asyncio.run(run(controller, args))


if __name__ == "__main__":
    raise SystemExit(main())
