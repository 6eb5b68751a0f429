"""JSON value decoding in single-document and concatenated modes."""

import codecs
import json
import logging
import math
from typing import IO, Any, Callable, Iterator

from ..errors import ParseError, ShapeError
from ..models.values import JsonKind

logger = logging.getLogger(__name__)

# JSON insignificant whitespace (RFC 8259), narrower than str.isspace()
JSON_WHITESPACE = " \t\n\r"

# A decode error this close to the end of the buffer may just be a token
# cut by the chunk boundary, so read more before giving up.
_TRUNCATION_WINDOW = 32

DEFAULT_CHUNK_SIZE = 65536

_NUMBER_CHARS = "0123456789+-.eE"


def _reject_constant(name: str) -> Any:
    raise ParseError(f"invalid JSON literal: {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ParseError(f"number out of range: {text}")
    return value


def _make_decoder() -> json.JSONDecoder:
    return json.JSONDecoder(
        parse_float=_parse_float, parse_constant=_reject_constant
    )


def _chunk_reader(stream: IO, chunk_size: int) -> Callable[[], str]:
    """Return a callable producing decoded text chunks ("" at EOF).

    Binary streams are decoded as UTF-8 (leading BOM dropped). ``read1`` is
    preferred so interactive input is handed over as soon as it arrives.
    """
    read = getattr(stream, "read1", None) or stream.read
    decoder = codecs.getincrementaldecoder("utf-8-sig")()

    def next_chunk() -> str:
        while True:
            chunk = read(chunk_size)
            if isinstance(chunk, str):
                return chunk
            try:
                text = decoder.decode(chunk, final=not chunk)
            except UnicodeDecodeError as e:
                raise ParseError(f"input is not valid UTF-8: {e}") from e
            # A multi-byte sequence split across reads decodes to ""
            if text or not chunk:
                return text

    return next_chunk


def decode_single(stream: IO) -> Any:
    """Parse the whole stream as exactly one JSON value.

    Args:
        stream: Binary (UTF-8) or text stream

    Returns:
        The decoded value

    Raises:
        ParseError: Invalid JSON, trailing data, or empty input
    """
    data = stream.read()
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"input is not valid UTF-8: {e}") from e
    else:
        text = data

    if not text.strip(JSON_WHITESPACE):
        raise ParseError("empty input: expected a JSON document", 0)

    try:
        return _make_decoder().decode(text)
    except json.JSONDecodeError as e:
        raise ParseError(str(e), e.pos) from e
    except ValueError as e:
        # e.g. integers past sys.get_int_max_str_digits()
        raise ParseError(str(e)) from e
    except RecursionError as e:
        raise ParseError("JSON nesting too deep") from e


def decode_concatenated(
    stream: IO, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[Any]:
    """Yield consecutive top-level JSON values from a stream.

    Values may be separated by whitespace only. Each value is yielded as
    soon as it is complete; the stream ends cleanly at EOF between values.

    Args:
        stream: Binary (UTF-8) or text stream
        chunk_size: Maximum bytes requested per read

    Yields:
        Decoded values in stream order

    Raises:
        ParseError: Malformed or truncated value (raised on the pull that
            reaches it)
    """
    next_chunk = _chunk_reader(stream, chunk_size)
    decoder = _make_decoder()
    buffer = ""
    offset = 0  # characters consumed before buffer[0]
    eof = False

    def fill(target: int = 0) -> bool:
        """Append chunks until the buffer holds target chars (at least one
        chunk); False if EOF came before anything was read."""
        nonlocal buffer, eof
        grew = False
        while not eof:
            chunk = next_chunk()
            if not chunk:
                eof = True
                break
            buffer += chunk
            grew = True
            if len(buffer) >= target:
                break
        return grew

    while True:
        stripped = buffer.lstrip(JSON_WHITESPACE)
        offset += len(buffer) - len(stripped)
        buffer = stripped

        if not buffer:
            if not fill():
                return
            continue

        try:
            value, end = decoder.raw_decode(buffer)
        except json.JSONDecodeError as e:
            truncated = (
                e.pos >= len(buffer) - _TRUNCATION_WINDOW
                or e.msg.startswith("Unterminated string")
            )
            # Every retry decodes from buffer[0] again, so a large value
            # waits for the buffer to double to keep the total work linear
            target = 2 * len(buffer) if len(buffer) >= chunk_size else 0
            if truncated and fill(target):
                continue
            raise ParseError(
                f"{e.msg} (char {offset + e.pos})", offset + e.pos
            ) from e
        except ValueError as e:
            raise ParseError(f"{e} (char {offset})", offset) from e
        except RecursionError as e:
            raise ParseError(
                f"JSON nesting too deep (char {offset})", offset
            ) from e

        # A number followed only by number characters up to the buffer end
        # ("12", "1." or "1e") may continue in the next chunk
        rest = buffer[end:]
        if (
            JsonKind.of(value) is JsonKind.NUMBER
            and not rest.strip(_NUMBER_CHARS)
            and fill()
        ):
            continue

        yield value
        buffer = buffer[end:]
        offset += end


def iter_values(stream: IO, no_root: bool) -> Iterator[Any]:
    """Select the decode mode and return the sequence of records.

    In single-document mode the whole input is decoded (and its shape
    checked) before this returns, so errors surface before any output.

    Raises:
        ParseError: Invalid JSON (single-document mode)
        ShapeError: Root value is not an array
    """
    if no_root:
        logger.debug("decoding concatenated JSON documents")
        return decode_concatenated(stream)

    logger.debug("decoding single JSON document")
    root = decode_single(stream)
    if JsonKind.of(root) is not JsonKind.ARRAY:
        raise ShapeError("root object is not an array")
    logger.debug("root array holds %d elements", len(root))
    return iter(root)


__all__ = ["decode_concatenated", "decode_single", "iter_values"]
