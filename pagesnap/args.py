import re
from typing import Optional, Sequence

from pagesnap.config import Config
from pagesnap.errors import UsageError
from pagesnap.models import CaptureRequest

FULLPAGE = "fullpage"
SIZE_PATTERN = re.compile(r"([0-9]+)x([0-9]+)")
SIZE_HINT = "Size argument should look like '1280x1024'"


def parse_size(token: str) -> Optional[tuple[int, int]]:
    """Parse a size token.

    Returns None for ``fullpage`` (any case) and ``(width, height)`` for
    ``<digits>x<digits>``. Anything else, including zero sized dimensions,
    raises UsageError.
    """
    if token.lower() == FULLPAGE:
        return None

    match = SIZE_PATTERN.fullmatch(token)
    if match is None:
        raise UsageError(SIZE_HINT)

    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        raise UsageError(SIZE_HINT)
    return width, height


def parse_args(argv: Sequence[str], config: Config) -> CaptureRequest:
    """Turn positional arguments (program name excluded) into a CaptureRequest."""
    if len(argv) == 0:
        raise UsageError("Missing URL to capture", exit_code=0)
    if len(argv) > 2:
        raise UsageError(f"Expected a url and an optional size, got {len(argv)} arguments")

    url = argv[0]
    if len(argv) == 1:
        return CaptureRequest(
            url=url, width=config.default_width, height=config.default_height
        )

    size = parse_size(argv[1])
    if size is None:
        return CaptureRequest(
            url=url,
            width=config.default_width,
            height=config.default_height,
            full_page=True,
        )

    width, height = size
    return CaptureRequest(url=url, width=width, height=height)
