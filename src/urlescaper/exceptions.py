class EscaperError(Exception):
    """
    Base class for the errors raised by this package.
    """


class InvalidEncoding(EscaperError, ValueError):
    """
    subclass of :class:`~ValueError`

    Raised when an encoding name is empty or is not one of
    :data:`urlescaper.escaper.SUPPORTED_ENCODINGS`.
    """

    def __init__(self, encoding, msg=None):
        self.encoding = encoding
        if msg is None:
            msg = "Unsupported encoding %r" % (encoding,)
        super().__init__(msg)


class ImmutableEncoding(EscaperError, RuntimeError):
    """
    Raised when the encoding of an :class:`~urlescaper.helper.EscapeUrl`
    is changed after its escaper has been created.
    """

    def __init__(self, encoding, requested):
        self.encoding = encoding
        self.requested = requested
        super().__init__(
            "Character encoding settings cannot be changed once the Helper "
            "has been used or if an Escaper object has been directly "
            "injected (current %r, requested %r)" % (encoding, requested)
        )


class EscapeError(EscaperError, UnicodeError):
    """
    subclass of :class:`~UnicodeError`

    The text contains characters that cannot be represented in the
    escaper's encoding.
    """

    def __init__(self, encoding, value, reason=""):
        self.encoding = encoding
        self.value = value
        self.reason = reason
        super().__init__(
            "Cannot encode %r using %r: %s" % (value, encoding, reason)
        )
