import logging

import pytest

from urlescaper.escaper import SUPPORTED_ENCODINGS

log = logging.getLogger(__name__)

NESTED = {
    "foo": "<b>bar</b>",
    "baz": [
        "<em>bat</em>",
        {"second": ["<i>third</i>"]},
    ],
}

NESTED_ESCAPED = {
    "foo": "%3Cb%3Ebar%3C%2Fb%3E",
    "baz": [
        "%3Cem%3Ebat%3C%2Fem%3E",
        {"second": ["%3Ci%3Ethird%3C%2Fi%3E"]},
    ],
}


@pytest.fixture
def nested():
    return {
        "foo": NESTED["foo"],
        "baz": [NESTED["baz"][0], {"second": list(NESTED["baz"][1]["second"])}],
    }


@pytest.fixture
def nested_escaped():
    return NESTED_ESCAPED


@pytest.fixture(params=SUPPORTED_ENCODINGS)
def supported_encoding(request):
    log.debug("using encoding %s", request.param)
    return request.param
