"""
Encoding validation and percent-escaping of single values.

An :class:`Escaper` is bound to one of the :data:`SUPPORTED_ENCODINGS`
and turns text into a string that is safe to embed in any part of a URL::

    >>> Escaper('utf-8').escape_url('<b>bar</b>')
    '%3Cb%3Ebar%3C%2Fb%3E'

Only the RFC 3986 unreserved characters (``A-Z a-z 0-9 - _ . ~``) are
left alone, every other octet becomes ``%XX``.
"""

from urllib.parse import quote_from_bytes

from urlescaper.exceptions import EscapeError, InvalidEncoding

__all__ = [
    "SUPPORTED_ENCODINGS",
    "Escaper",
    "validate_encoding",
    "make_escaper",
    "escape_url",
]

# The closed set of accepted aliases, in the order callers have always
# seen them.  Anything else is rejected rather than guessed.
SUPPORTED_ENCODINGS = (
    "iso-8859-1",
    "iso8859-1",
    "iso-8859-5",
    "iso8859-5",
    "iso-8859-15",
    "iso8859-15",
    "utf-8",
    "cp866",
    "ibm866",
    "866",
    "cp1251",
    "windows-1251",
    "win-1251",
    "1251",
    "cp1252",
    "windows-1252",
    "1252",
    "koi8-r",
    "koi8-ru",
    "koi8r",
    "big5",
    "950",
    "gb2312",
    "936",
    "big5-hkscs",
    "shift_jis",
    "sjis",
    "sjis-win",
    "cp932",
    "932",
    "euc-jp",
    "eucjp",
    "eucjp-win",
    "macroman",
)

# alias -> Python codec used to produce the octets that get escaped
_codecs = {
    "iso-8859-1": "iso8859_1",
    "iso8859-1": "iso8859_1",
    "iso-8859-5": "iso8859_5",
    "iso8859-5": "iso8859_5",
    "iso-8859-15": "iso8859_15",
    "iso8859-15": "iso8859_15",
    "utf-8": "utf_8",
    "cp866": "cp866",
    "ibm866": "cp866",
    "866": "cp866",
    "cp1251": "cp1251",
    "windows-1251": "cp1251",
    "win-1251": "cp1251",
    "1251": "cp1251",
    "cp1252": "cp1252",
    "windows-1252": "cp1252",
    "1252": "cp1252",
    "koi8-r": "koi8_r",
    # KOI8-RU has no codec of its own; KOI8-U covers the Cyrillic range
    "koi8-ru": "koi8_u",
    "koi8r": "koi8_r",
    "big5": "big5",
    "950": "cp950",
    "gb2312": "gb2312",
    "936": "gbk",
    "big5-hkscs": "big5hkscs",
    "shift_jis": "shift_jis",
    "sjis": "shift_jis",
    "sjis-win": "cp932",
    "cp932": "cp932",
    "932": "cp932",
    "euc-jp": "euc_jp",
    "eucjp": "euc_jp",
    "eucjp-win": "euc_jp",
    "macroman": "mac_roman",
}


def validate_encoding(name):
    """
    Return the normalized (lowercase) form of ``name``.

    Raises :class:`~urlescaper.exceptions.InvalidEncoding` for ``None``,
    non-string values, the empty string and any name that is not a
    case-insensitive match for one of :data:`SUPPORTED_ENCODINGS`.  There is
    deliberately no fallback to a default encoding.
    """

    if not isinstance(name, str) or name == "":
        raise InvalidEncoding(
            name,
            "%r is not a valid encoding; "
            "an empty or non-string value cannot be used" % (name,),
        )

    normalized = name.lower()

    if normalized not in _codecs:
        raise InvalidEncoding(name)

    return normalized


class Escaper:
    """
    Percent-escape text for one validated encoding.

    Instances are immutable: the encoding is fixed at construction.
    """

    __slots__ = ("_encoding", "_codec")

    def __init__(self, encoding="utf-8"):
        encoding = validate_encoding(encoding)
        object.__setattr__(self, "_encoding", encoding)
        object.__setattr__(self, "_codec", _codecs[encoding])

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    @property
    def encoding(self):
        return self._encoding

    def get_encoding(self):
        return self._encoding

    def escape_url(self, text):
        """
        Escape ``text`` for use anywhere in a URL.

        ``str`` input is encoded with this escaper's encoding first,
        ``bytes`` are escaped octet for octet.  Characters the encoding
        cannot represent raise :class:`~urlescaper.exceptions.EscapeError`.
        """

        if isinstance(text, str):
            try:
                data = text.encode(self._codec, "strict")
            except UnicodeEncodeError as e:
                raise EscapeError(self._encoding, text, e.reason) from e
        elif isinstance(text, (bytes, bytearray)):
            data = bytes(text)
        else:
            raise TypeError(
                "escape_url() expects str or bytes, got %s" % type(text).__name__
            )

        return quote_from_bytes(data, safe="")

    def __eq__(self, other):
        if not isinstance(other, Escaper):
            return NotImplemented

        return self._encoding == other._encoding

    def __reduce__(self):
        return (self.__class__, (self._encoding,))

    def __hash__(self):
        return hash((Escaper, self._encoding))

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self._encoding)


def make_escaper(name):
    """Validate ``name`` and return an :class:`Escaper` bound to it."""

    return Escaper(validate_encoding(name))


def escape_url(escaper, text):
    return escaper.escape_url(text)
