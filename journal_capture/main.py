import argparse
import json
import mimetypes
import sys
from pathlib import Path

from journal_capture.attachments.exceptions import AttachmentError
from journal_capture.attachments.models import IncomingFile
from journal_capture.classification.models import EntryType
from journal_capture.composition.exceptions import EmptySubmissionError
from journal_capture.config.settings import Settings
from journal_capture.logging.logger import Log
from journal_capture.metadata.capture_metadata import capture_metadata
from journal_capture.session.pipeline import build_pipeline
from journal_capture.session.session import CaptureSession


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="journal-capture",
        description="Compose a journal entry draft from text and attached files.",
    )
    parser.add_argument("files", nargs="*", type=Path, help="images or documents to attach")
    parser.add_argument("--text", default="", help="typed or transcribed entry text")
    parser.add_argument(
        "--type",
        dest="entry_type",
        choices=[t.value for t in EntryType],
        help="explicit entry type; overrides any detected type",
    )
    parser.add_argument("--user-agent", default=None, help="device user agent for metadata")
    return parser.parse_args(argv)


def read_file(path: Path) -> IncomingFile:
    mime_type, _ = mimetypes.guess_type(path.name)
    return IncomingFile(
        file_name=path.name,
        mime_type=mime_type or "",
        raw_bytes=path.read_bytes(),
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> pipeline -> session -> draft JSON on stdout."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    session = CaptureSession(build_pipeline(settings))
    try:
        for path in args.files:
            session.register(read_file(path))
        draft = session.submit(
            args.text,
            type_override=EntryType.parse(args.entry_type),
            metadata=capture_metadata(user_agent=args.user_agent),
        )
    except (AttachmentError, EmptySubmissionError, OSError) as exc:
        Log.error(f"Capture rejected: {exc}")
        session.cancel()
        return 2
    except KeyboardInterrupt:
        session.cancel()
        Log.info("Capture cancelled")
        return 130

    json.dump(draft.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
