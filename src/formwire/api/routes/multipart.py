"""
Multipart endpoints - parse a multipart request body or echo it back re-rendered.
"""

from fastapi import APIRouter, HTTPException, Request, Response
import structlog

from ...config import settings
from ...message import Message
from ...models.api_models import ParseResponse, PartSummary
from ...parsing import MultipartError
from ...parsing.wire import display_header, display_text, to_bytes

logger = structlog.get_logger(__name__)
router = APIRouter()


async def read_multipart_request(request: Request) -> Message:
    """
    Validate and parse the incoming request as a multipart message.

    Args:
        request: Incoming request

    Returns:
        Parsed Message

    Raises:
        HTTPException: 400 for a non-multipart or malformed body, 413 when too large
    """
    content_type = request.headers.get("content-type", "")
    if not content_type.lower().startswith("multipart/"):
        raise HTTPException(
            status_code=400,
            detail=f"Expected a multipart Content-Type, got {content_type!r}"
        )

    body = await request.body()

    size_mb = len(body) / (1024 * 1024)
    if size_mb > settings.max_body_size_mb:
        raise HTTPException(
            status_code=413,
            detail=f"Body size ({size_mb:.1f}MB) exceeds maximum ({settings.max_body_size_mb}MB)"
        )

    try:
        message = Message.parse(request.headers, body, max_sections=settings.max_parts)
    except MultipartError as e:
        logger.warning("Malformed multipart body", error=str(e), size_bytes=len(body))
        raise HTTPException(status_code=400, detail=f"Malformed multipart body: {e}")

    logger.info(
        "Multipart body parsed",
        boundary=message.boundary,
        part_count=len(message.parts),
        size_bytes=len(body),
    )
    return message


@router.post("/parse", response_model=ParseResponse)
async def parse_multipart(request: Request) -> ParseResponse:
    """
    Parse a multipart body and describe its parts.

    Returns:
        ParseResponse with each part's headers and body
    """
    message = await read_multipart_request(request)

    parts = []
    for part in message.parts:
        raw = to_bytes(part.body)
        parts.append(
            PartSummary(
                headers=[display_header(header) for header in part.headers],
                body=display_text(raw),
                size_bytes=len(raw),
            )
        )

    return ParseResponse(
        success=True,
        boundary=message.boundary,
        part_count=len(parts),
        parts=parts,
    )


@router.post("/echo")
async def echo_multipart(request: Request) -> Response:
    """
    Parse a multipart body and send it back re-serialized.

    Returns:
        multipart/form-data response carrying the same parts
    """
    message = await read_multipart_request(request)
    return Response(
        content=message.dump_bytes(),
        media_type=message.content_type_header(),
    )
