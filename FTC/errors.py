class CompressionError(ValueError):
    """Base class for every error raised by compress and decompress."""


class DecompressionError(CompressionError):
    """Malformed compressed buffer."""


class TruncatedInput(DecompressionError):
    pass


class CorruptEncoding(DecompressionError):
    pass


class MalformedPadding(DecompressionError):
    pass


class UnsupportedUnit(CompressionError):
    """Unit has no serialization mapping (raised on compress and decompress)."""
