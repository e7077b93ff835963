"""
View helper that percent-escapes values, recursing into structures.

::

    >>> escape = EscapeUrl()
    >>> escape({'q': 'a b', 'tags': ['x/y']})
    {'q': 'a%20b', 'tags': ['x%2Fy']}

Mappings and sequences are always traversed.  Other objects are
converted with ``str()`` unless :attr:`EscapeUrl.RECURSE_OBJECT` is
given, in which case they are turned into a ``dict`` (through ``to_dict()``
or ``_asdict()`` when available, their public attributes otherwise) and
traversed as well.
"""

import enum
from collections.abc import Mapping, Sequence
from numbers import Number

from urlescaper.escaper import make_escaper
from urlescaper.exceptions import ImmutableEncoding
from urlescaper.util import to_text, warn_deprecation

__all__ = ["RecurseMode", "EscapeUrl"]

_scalar_types = (str, bytes, bytearray, Number, type(None))


class RecurseMode(enum.IntFlag):
    NONE = 0x00
    # accepted for callers that pass it; containers are traversed anyway
    ARRAY = 0x01
    OBJECT = 0x02


def _as_mapping(obj):
    for name in ("to_dict", "_asdict"):
        method = getattr(obj, name, None)

        if method is not None and callable(method):
            return method()

    if hasattr(obj, "__dict__"):
        fields = vars(obj)
    else:
        fields = {}
        slotted = False

        for cls in reversed(type(obj).__mro__):
            if "__slots__" not in cls.__dict__:
                continue
            slotted = True
            slots = cls.__dict__["__slots__"]

            if isinstance(slots, str):
                slots = (slots,)

            for slot in slots:
                if hasattr(obj, slot):
                    fields[slot] = getattr(obj, slot)

        if not slotted:
            # no public fields to speak of; the caller falls back to str()
            return None

    return {k: v for k, v in fields.items() if not k.startswith("_")}


class EscapeUrl:
    """
    Escape values for safe inclusion in URLs.

    The helper starts out configurable: :meth:`set_encoding` may be called
    until the escaper is needed.  The first call to :meth:`get_escaper`,
    :meth:`set_escaper` or the helper itself creates (or adopts) the
    escaper and locks the encoding for the rest of the helper's life.
    """

    RECURSE_NONE = RecurseMode.NONE
    RECURSE_ARRAY = RecurseMode.ARRAY
    RECURSE_OBJECT = RecurseMode.OBJECT

    encoding = "UTF-8"

    def __init__(self, encoding=None, escaper=None):
        self._escaper = None

        if escaper is not None:
            if encoding is not None:
                raise TypeError("Pass either encoding or escaper, not both")
            self.set_escaper(escaper)
        elif encoding is not None:
            self.set_encoding(encoding)

    def set_encoding(self, encoding):
        """
        Record the encoding used when the escaper is created.

        The name is only validated when the escaper is created.
        """

        if self._escaper is not None:
            raise ImmutableEncoding(self.encoding, encoding)
        self.encoding = encoding

        return self

    def get_encoding(self):
        return self.encoding

    def set_escaper(self, escaper):
        for name in ("escape_url", "get_encoding"):
            if not callable(getattr(escaper, name, None)):
                raise TypeError(
                    "Expected an Escaper, got %s" % type(escaper).__name__
                )
        encoding = escaper.get_encoding()
        self._escaper = escaper
        self.encoding = encoding

        return self

    def get_escaper(self):
        if self._escaper is None:
            # a failed validation leaves the helper configurable
            self._escaper = make_escaper(self.encoding)

        return self._escaper

    def escape(self, value):
        return self.get_escaper().escape_url(to_text(value))

    def __call__(self, value, recurse=RECURSE_NONE):
        # checked up front so an invalid encoding fails even for empty input
        self.get_escaper()
        recurse = RecurseMode(recurse)

        return self._escape_value(value, recurse, set())

    def _escape_value(self, value, recurse, active):
        if isinstance(value, _scalar_types):
            return self.escape(value)

        is_container = isinstance(value, (Mapping, Sequence))

        if not is_container and not recurse & RecurseMode.OBJECT:
            return self.escape(value)

        if not is_container:
            fields = _as_mapping(value)

            if fields is None:
                return self.escape(value)

        marker = id(value)

        if marker in active:
            raise ValueError("Circular reference detected")
        active.add(marker)

        try:
            if isinstance(value, Mapping):
                result = {
                    k: self._escape_value(v, recurse, active)
                    for k, v in value.items()
                }
            elif isinstance(value, list):
                result = [self._escape_value(v, recurse, active) for v in value]
            elif isinstance(value, tuple):
                items = [self._escape_value(v, recurse, active) for v in value]

                if hasattr(value, "_fields"):
                    # namedtuple
                    result = type(value)(*items)
                else:
                    result = tuple(items)
            elif isinstance(value, Sequence):
                result = [self._escape_value(v, recurse, active) for v in value]
            else:
                result = self._escape_value(fields, recurse, active)

                if not isinstance(result, dict):
                    result = dict(result)
        finally:
            active.discard(marker)

        return result

    # camelCase spellings kept for existing callers

    def setEncoding(self, encoding):
        warn_deprecation(
            "EscapeUrl.setEncoding is deprecated, use set_encoding", "2.0", 2
        )

        return self.set_encoding(encoding)

    def getEncoding(self):
        warn_deprecation(
            "EscapeUrl.getEncoding is deprecated, use get_encoding", "2.0", 2
        )

        return self.get_encoding()

    def setEscaper(self, escaper):
        warn_deprecation(
            "EscapeUrl.setEscaper is deprecated, use set_escaper", "2.0", 2
        )

        return self.set_escaper(escaper)

    def getEscaper(self):
        warn_deprecation(
            "EscapeUrl.getEscaper is deprecated, use get_escaper", "2.0", 2
        )

        return self.get_escaper()
