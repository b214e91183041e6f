"""
Shared pytest fixtures for the test suite.
"""

import pytest

from langschema import Schema


class WarningRecorder(object):
    """Callable usable as the parser's warning callback."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


@pytest.fixture
def warning():
    """A fresh warning recorder."""
    return WarningRecorder()


@pytest.fixture
def empty_schema():
    """The schema returned for a tag that failed to parse."""
    return Schema()


@pytest.fixture
def sample_html():
    """A small document declaring languages in all the places we look."""
    return """<!DOCTYPE html>
<html lang="en-GB">
<head>
  <meta http-equiv="Content-Language" content="en-GB, cy">
  <link rel="alternate" hreflang="cy" href="/cy/">
  <link rel="alternate" hreflang="x-default" href="/">
</head>
<body>
  <p xml:lang="zh-Hant-TW">...</p>
  <p lang="en_US">...</p>
  <p lang="">...</p>
</body>
</html>
"""
