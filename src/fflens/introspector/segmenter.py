"""Splits ffmpeg's diagnostic output into one text block per stream.

A block starts at a line whose first token is ``Stream #<n>:<m>`` and runs
up to the next such line or the end of the text. Its per-stream metadata
(title, DURATION, BPS tags) sits on the indented lines that follow the
header.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from fflens.domain.enums import StreamType
from fflens.introspector.classifier import classify_block, first_line

logger = logging.getLogger(__name__)

_STREAM_HEADER = re.compile(r"^[ \t]*(Stream #(\d+):(\d+))", re.MULTILINE)


@dataclass(frozen=True)
class StreamBlock:
    """Text describing one stream.

    Attributes:
        position: Index of this header among all stream headers in the
            output, counting blocks that were dropped.
        stream_id: Stream identifier as printed ("0:1").
        stream_type: Classified type of the block.
        text: Block text, starting at "Stream #".
    """

    position: int
    stream_id: str
    stream_type: StreamType
    text: str

    @property
    def header(self) -> str:
        """First non-empty line of the block."""
        return first_line(self.text)


def split_stream_blocks(output: str) -> Iterator[tuple[int, str, str]]:
    """Yield (position, stream_id, text) for every stream header.

    Args:
        output: Full diagnostic text.
    """
    previous: re.Match[str] | None = None
    position = 0
    for match in _STREAM_HEADER.finditer(output):
        if previous is not None:
            block_text = output[previous.start(1) : match.start()]
            yield position, _stream_id(previous), block_text
            position += 1
        previous = match
    if previous is not None:
        yield position, _stream_id(previous), output[previous.start(1) :]


def iter_stream_blocks(output: str) -> Iterator[StreamBlock]:
    """Yield classified stream blocks in the order ffmpeg printed them.

    Blocks without a video, audio or subtitle marker are dropped; a file
    having no stream of some kind is not an error.

    Args:
        output: Full diagnostic text.

    Yields:
        StreamBlock for each recognized stream.
    """
    for position, stream_id, text in split_stream_blocks(output):
        stream_type = classify_block(text)
        if stream_type is StreamType.UNKNOWN:
            logger.debug("Skipping stream %s with no known type marker", stream_id)
            continue
        yield StreamBlock(
            position=position,
            stream_id=stream_id,
            stream_type=stream_type,
            text=text,
        )


def _stream_id(match: re.Match[str]) -> str:
    return f"{match.group(2)}:{match.group(3)}"
