import re

import clientstack
from clientstack import constants
from clientstack.version import __version__


def test_version():
    assert re.fullmatch(r"\d+\.\d+\.\d+(\.dev\d+)?", __version__)
    assert clientstack.__version__ == __version__
    assert constants.VERSION == __version__
