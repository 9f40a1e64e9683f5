"""Package-specific exception types."""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for errors raised while preparing a document for conversion.

    The walker itself never raises; these come from the collaborators that
    decode and parse the source document.
    """


class MissingBodyError(ConversionError):
    """Raised when the parsed document has no ``<body>`` element."""

    def __init__(self):
        super().__init__("Document has no <body> element")


class DecodingError(ConversionError):
    """Raised when the source bytes cannot be decoded.

    Args:
        encoding: Encoding that was requested, or None when it was detected.
    """

    def __init__(self, encoding: str | None):
        self.encoding = encoding
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.encoding is None:
            return "Could not detect the document encoding"
        return f"Document is not valid {self.encoding}"
