import warnings

import pytest

from urlescaper.util import to_text, warn_deprecation


class Test_warn_deprecation:
    def setup_method(self, method):

        self.oldwarn = warnings.warn
        warnings.warn = self._warn
        self.warnings = []

    def teardown_method(self, method):

        warnings.warn = self.oldwarn
        del self.warnings

    def _callFUT(self, text, version, stacklevel):

        return warn_deprecation(text, version, stacklevel)

    def _warn(self, text, type, stacklevel=1):
        self.warnings.append(locals())

    def test_warn_deprecation(self):
        v = "1.0.0"

        pytest.raises(DeprecationWarning, self._callFUT, "foo", v[:3], 1)

    def test_warn_deprecation_future_version(self):
        v = "9.9.9"

        self._callFUT("foo", v[:3], 1)
        assert len(self.warnings) == 1
        assert self.warnings[0]["type"] == DeprecationWarning
        assert self.warnings[0]["stacklevel"] == 2

    def test_warn_deprecation_older_version(self):
        pytest.raises(DeprecationWarning, self._callFUT, "foo", "0.9", 1)

    def test_warn_deprecation_next_major(self):
        self._callFUT("foo", "2.0", 1)
        assert len(self.warnings) == 1


class Dummy:
    def __str__(self):
        return "m\xf8ose"


@pytest.mark.parametrize(
    "input,expected",
    [
        ("abc", "abc"),
        (b"abc", b"abc"),
        (None, ""),
        (True, "1"),
        (False, ""),
        (42, "42"),
        (0, "0"),
        (bytearray(b"a/b"), bytearray(b"a/b")),
        (2.0, "2"),
        (-0.5, "-0.5"),
        (0.1, "0.1"),
        (float("inf"), "inf"),
        (Dummy(), "m\xf8ose"),
    ],
)
def test_to_text(input, expected):
    assert to_text(input) == expected

