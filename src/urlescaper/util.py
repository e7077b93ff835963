import warnings


def to_text(value):
    """Coerce a scalar to the text that gets escaped

    ``None`` and ``False`` become the empty string and ``True`` becomes
    ``"1"``.  Integral floats lose their fractional part (``1.0`` gives
    ``"1"``), other floats use their shortest round-tripping form.
    ``bytes`` and ``bytearray`` are returned untouched so they can be
    escaped octet for octet; anything else goes through ``str()``.
    """

    if value is None or value is False:
        return ""

    if value is True:
        return "1"

    if isinstance(value, (str, bytes, bytearray)):
        return value

    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))

        return repr(value)

    return str(value)


def _release(version):
    return tuple(int(part) for part in version.split(".")[:2])


def warn_deprecation(text, version, stacklevel):
    # version is the release that removes the name; from then on it raises
    from urlescaper import __version__

    if _release(version) <= _release(__version__):
        raise DeprecationWarning(text)
    else:
        cls = DeprecationWarning
    warnings.warn(text, cls, stacklevel=stacklevel + 1)
