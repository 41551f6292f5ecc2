"""Split raw document text into front matter and body"""

import logging

from mdtailor.core.errors import DocumentFormatError, Err, Ok, Result
from mdtailor.core.models import SplitDocument


logger = logging.getLogger(__name__)

DELIMITER = "---"


def split_document(raw: str) -> Result[SplitDocument, DocumentFormatError]:
    """Return (front matter, body) when raw holds exactly two delimiters.

    The text before the first delimiter is discarded. A body containing
    another '---' (e.g. a thematic break) is rejected like any other count.
    """
    segments = raw.split(DELIMITER)
    if len(segments) != 3:
        return Err(DocumentFormatError(segments=len(segments)))
    preamble, front_matter, body = segments
    if preamble.strip():
        logger.debug("Discarding %d characters before front matter", len(preamble))
    return Ok(SplitDocument(front_matter=front_matter, body=body))
