import logging

import zstandard as zstd

from bincraft.exceptions import DecompressError

logger = logging.getLogger(__name__)


def decompress(payload: bytes) -> bytes:
    """Inflate a zstd-compressed snapshot.

    Streams frame by frame so payloads without a content size in their frame
    header decode too, and concatenated frames are all inflated. Raises
    DecompressError if a frame is corrupt or ends before its last block.
    """
    if not payload:
        logger.warning("Empty compressed payload")
        raise DecompressError("Empty compressed payload")

    chunks = []
    remaining = payload
    frames = 0
    while remaining:
        decompressor = zstd.ZstdDecompressor().decompressobj()
        try:
            chunks.append(decompressor.decompress(remaining))
        except zstd.ZstdError as exc:
            logger.warning("Corrupt zstd stream at frame %d (%d bytes): %s", frames, len(payload), exc)
            raise DecompressError(f"Corrupt zstd stream: {exc}") from exc

        if not decompressor.eof:
            logger.warning("Truncated zstd stream at frame %d: %d bytes in", frames, len(payload))
            raise DecompressError("Truncated zstd stream")

        frames += 1
        remaining = decompressor.unused_data

    data = b"".join(chunks)
    logger.debug("Decompressed %d -> %d bytes in %d frame(s)", len(payload), len(data), frames)
    return data
