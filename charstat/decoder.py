"""
UTF-8 decoding of a byte stream into code points.

Decoding stops quietly at the first malformed sequence: whatever decoded
cleanly before it is yielded, the rest of the stream is not read. Callers see
the same thing they see at end of input.
"""

import codecs
import logging

from .config import READ_CHUNK_SIZE

logger = logging.getLogger(__name__)


def iter_code_points(stream, chunk_size: int = READ_CHUNK_SIZE):
    """
    Yield the code point of every character decoded from ``stream``.

    ``stream`` only needs ``read(size) -> bytes``. Sequences split across
    chunk boundaries are carried over to the next read; a sequence still
    incomplete at end of input counts as malformed.
    """
    pending = b""
    offset = 0  # stream offset of pending[0]
    while True:
        chunk = stream.read(chunk_size)
        final = not chunk
        data = pending + chunk
        try:
            text, consumed = codecs.utf_8_decode(data, "strict", final)
        except UnicodeDecodeError as e:
            for char in data[:e.start].decode("utf-8"):
                yield ord(char)
            logger.info("Stopped decoding at byte %d: %s", offset + e.start, e.reason)
            return
        for char in text:
            yield ord(char)
        if final:
            return
        pending = data[consumed:]
        offset += consumed
