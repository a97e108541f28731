"""
Command-line interface for inspecting multipart bodies.

Usage:
    # Describe the parts of a captured request body
    formwire-inspect body.bin --content-type 'multipart/form-data; boundary=X'

    # Re-render the body in canonical wire form
    formwire-inspect body.bin -t 'multipart/form-data; boundary=X' --format wire

    # Write the description to a file
    formwire-inspect body.bin -t 'multipart/form-data; boundary=X' -o parts.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from formwire.config import settings
from formwire.logging_config import get_logger, setup_logging
from formwire.message import Message
from formwire.parsing import MultipartError, find_boundary_collisions
from formwire.parsing.wire import display_header, display_text, to_bytes


setup_logging()
logger = get_logger(__name__)


def load_message(body_path: Path, content_type: str) -> Message:
    """
    Read a body file and parse it as a multipart message.

    Args:
        body_path: Path to the raw body
        content_type: Content-Type header value carrying the boundary

    Returns:
        Parsed Message

    Raises:
        FileNotFoundError: If the file doesn't exist
        MultipartError: If the body framing is malformed
    """
    body = body_path.read_bytes()
    logger.info("Parsing body file", path=str(body_path), size_bytes=len(body))
    return Message.parse(
        {"Content-Type": content_type}, body, max_sections=settings.max_parts
    )


def describe_message(message: Message) -> dict:
    """Describe a message as a JSON-serializable dict."""
    parts = []
    for index, part in enumerate(message.parts):
        raw = to_bytes(part.body)
        parts.append({
            "index": index,
            "name": display_text(part.name) if part.name is not None else None,
            "filename": display_text(part.filename) if part.filename is not None else None,
            "headers": [display_header(header) for header in part.headers],
            "size_bytes": len(raw),
            "body": display_text(raw),
        })

    return {
        "boundary": message.boundary,
        "part_count": len(parts),
        "boundary_collisions": find_boundary_collisions(message.boundary, message.parts),
        "parts": parts,
    }


def write_output(message: Message, output_path: Optional[Path], format: str = "json"):
    """
    Write a message description (json) or its re-serialized body (wire).

    Args:
        message: Parsed message
        output_path: Output file path, stdout when None
        format: "json" or "wire"
    """
    if format == "wire":
        data = message.dump_bytes()
    else:
        data = (json.dumps(describe_message(message), ensure_ascii=False, indent=2) + "\n").encode("utf-8")

    if not output_path:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.info("Output written", path=str(output_path), format=format)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect or re-render a multipart body",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s body.bin -t 'multipart/form-data; boundary=----abc'
  %(prog)s body.bin -t 'multipart/form-data; boundary=----abc' --format wire
        """
    )

    parser.add_argument("input", type=str, help="Path to the raw multipart body")

    parser.add_argument(
        "--content-type",
        "-t",
        type=str,
        required=True,
        help="Content-Type header value, including the boundary parameter"
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["json", "wire"],
        default="json",
        help="Output format: part description or re-serialized body (default: json)"
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout)"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print a summary to stderr"
    )

    args = parser.parse_args(argv)

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    try:
        message = load_message(input_path, args.content_type)
    except MultipartError as e:
        logger.error("Parse failed", path=str(input_path), error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output_path = Path(args.output) if args.output else None
    write_output(message, output_path, args.format)

    if args.verbose:
        print(f"\n✓ Parsed {len(message.parts)} parts", file=sys.stderr)


if __name__ == "__main__":
    main()
