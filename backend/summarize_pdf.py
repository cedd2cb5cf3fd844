"""
Command-line client for LearnSmart PDF Summarizer.

Extracts the text of a PDF locally and asks the summarize API for a summary.

Usage:
    python summarize_pdf.py notes.pdf
    python summarize_pdf.py notes.pdf --api-url http://host:3001/api/summarize
    python summarize_pdf.py notes.pdf --preview first_page.png
    python summarize_pdf.py notes.pdf --text-only
"""
import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from config import SUMMARIZE_API_URL, CLIENT_TIMEOUT
from errors import ExtractionError
from services.pdf_extractor import PdfExtractor
from services.summary_client import SummaryApiClient
from services.summary_session import SummarySession, SessionState

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize a PDF document")
    parser.add_argument("pdf", help="Path to the PDF file")
    parser.add_argument(
        "--api-url",
        default=SUMMARIZE_API_URL,
        help=f"Summarize endpoint URL (default: {SUMMARIZE_API_URL})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=CLIENT_TIMEOUT,
        help="Request timeout in seconds"
    )
    parser.add_argument(
        "--preview",
        metavar="PNG",
        help="Write a preview of the first page to this file"
    )
    parser.add_argument(
        "--text-only",
        action="store_true",
        help="Print the extracted text without requesting a summary"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the client. Returns the process exit status."""
    args = parse_args(argv)
    pdf_path = Path(args.pdf)

    if not pdf_path.is_file():
        print(f"File not found: {pdf_path}", file=sys.stderr)
        return 1

    session = SummarySession(
        api_client=SummaryApiClient(api_url=args.api_url, timeout=args.timeout),
        extractor=PdfExtractor()
    )

    snapshot = session.select_path(pdf_path)
    if snapshot.state != SessionState.READY:
        print(snapshot.error, file=sys.stderr)
        return 1

    if args.preview:
        if snapshot.preview is None:
            logger.warning("No preview available")
        else:
            Path(args.preview).write_bytes(snapshot.preview.png)
            logger.info(
                f"Wrote {snapshot.preview.width}x{snapshot.preview.height} preview "
                f"({snapshot.preview.page_count} pages) to {args.preview}"
            )

    if args.text_only:
        try:
            print(session.extractor.extract_text(session.document), end="")
        except ExtractionError as e:
            print(e.public_message, file=sys.stderr)
            return 1
        return 0

    snapshot = session.summarize()
    if snapshot.state != SessionState.DONE:
        print(snapshot.error, file=sys.stderr)
        return 1

    print(snapshot.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
