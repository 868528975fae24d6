"""Command-line entry point for the architecture draft assistant."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .config import Settings, get_settings
from .content_service import build_content_service
from .document_loader import read_uploads
from .errors import ArchDraftError
from .log import configure_logging, get_logger
from .session_store import SessionStore
from .workflow import DocumentWorkflow, IngestResult


logger = get_logger(__name__)

CLI_CONVERSATION = "cli"


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Architecture Draft Assistant")
    parser.add_argument("--service", choices=["local", "remote"], default=None, help="Content service tier (defaults to ARCHDRAFT_CONTENT_SERVICE).")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (defaults to ARCHDRAFT_LOG_LEVEL).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summarize = subparsers.add_parser("summarize", help="Summarize one or more documents.")
    summarize.add_argument("files", nargs="+", type=Path, help="PDF, Word, image or text files.")

    draft = subparsers.add_parser("draft", help="Write the draft architecture document.")
    draft.add_argument("files", nargs="+", type=Path, help="PDF, Word, image or text files.")
    draft.add_argument("--output", type=Path, default=Path("architecture_draft.md"), help="Markdown file to write.")

    return parser.parse_args(argv)


def build_workflow(settings: Settings) -> DocumentWorkflow:
    return DocumentWorkflow(SessionStore(), build_content_service(settings))


def _ingest(workflow: DocumentWorkflow, files: List[Path]) -> IngestResult:
    result = workflow.ingest(CLI_CONVERSATION, read_uploads(files))
    for failure in result.failures:
        print(f"Skipped {failure.file_name}: {failure.reason}", file=sys.stderr)
    for notice in result.notices:
        print(notice, file=sys.stderr)
    return result


def run_summarize(args: argparse.Namespace, workflow: DocumentWorkflow) -> int:
    result = _ingest(workflow, args.files)
    if not result.ok:
        print(result.message, file=sys.stderr)
        return 1
    print(result.summary)
    return 0


def run_draft(args: argparse.Namespace, workflow: DocumentWorkflow) -> int:
    result = _ingest(workflow, args.files)
    if not result.ok:
        print(result.message, file=sys.stderr)
        return 1

    document = workflow.generate_architecture(CLI_CONVERSATION)
    output_path: Path = args.output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document + "\n", encoding="utf-8")
    print(f"Saved architecture draft to {output_path}")
    return 0


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    settings = get_settings()
    overrides = {}
    if args.service:
        overrides["content_service"] = args.service
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level, settings.log_json)

    try:
        workflow = build_workflow(settings)
        if args.command == "summarize":
            return run_summarize(args, workflow)
        if args.command == "draft":
            return run_draft(args, workflow)
        raise ValueError(f"Unknown command: {args.command}")
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except ArchDraftError as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
