"""Chart rendering errors."""


class ChartError(Exception):
    """Base exception for chart rendering errors."""

    pass


class DataFormatError(ChartError):
    """A bucket price cannot be coerced to a number."""

    pass


class EmptyInputError(ChartError):
    """No buckets were supplied to the renderer."""

    pass


class ResourceLoadError(ChartError):
    """A font or other required asset failed to load."""

    pass


class EncodingError(ChartError):
    """The image could not be encoded or written."""

    pass
