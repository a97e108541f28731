"""
Exceptions raised while parsing multipart bodies.

Every structural failure derives from MultipartError so callers can catch one
type and decide how to report it (the HTTP layer turns it into a 400).
"""


class MultipartError(ValueError):
    """Base class for multipart parsing errors."""


class MalformedSectionError(MultipartError):
    """A section has no blank line between its headers and its body."""


class MissingDelimiterError(MultipartError):
    """The body ends without the expected boundary delimiter."""


class SectionLimitError(MultipartError):
    """The body holds more sections than the caller allows."""
