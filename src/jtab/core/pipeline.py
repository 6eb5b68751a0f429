"""Conversion pipeline: decoder feeding the row projector."""

import logging
from typing import IO

from ..models.config import ConvertConfig
from .decoding import iter_values
from .projection import RowProjector, TextSink

logger = logging.getLogger(__name__)


def convert(
    config: ConvertConfig, input_stream: IO, output_stream: TextSink
) -> int:
    """Convert JSON from input_stream to delimited rows on output_stream.

    In single-document mode the input is fully decoded before the header is
    written; in concatenated mode the header goes out before the first value
    is read and rows follow as values arrive.

    Args:
        config: Conversion settings
        input_stream: JSON source (binary or text)
        output_stream: Text sink for the rows

    Returns:
        Number of rows written (header excluded)
    """
    values = iter_values(input_stream, no_root=config.no_root)
    projector = RowProjector(config, output_stream)
    count = projector.project(values)
    logger.info("wrote %d records", count)
    return count


__all__ = ["convert"]
