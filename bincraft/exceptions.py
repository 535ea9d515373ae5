class BinCraftError(Exception):
    """Base class for snapshot decoding failures."""


class DecompressError(BinCraftError):
    """The compressed stream is empty, truncated or corrupt."""


class FormatError(BinCraftError, ValueError):
    """The decompressed buffer does not follow the snapshot layout."""
