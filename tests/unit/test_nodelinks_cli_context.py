"""Unit tests for reading root-callback state off the Typer context chain."""

from types import SimpleNamespace

import pytest

from nodelinks.cli._context import get_display_format

pytestmark = pytest.mark.cli


def _chain(*objs):
    ctx = None
    for obj in objs:
        ctx = SimpleNamespace(obj=obj, parent=ctx)
    return ctx


def test_format_found_on_own_context():
    assert get_display_format(_chain({"display_format": "json"})) == "json"


def test_format_found_on_parent():
    ctx = _chain({"display_format": "json"}, None, {"other": 1})
    assert get_display_format(ctx) == "json"


def test_missing_format_is_an_error():
    with pytest.raises(RuntimeError):
        get_display_format(_chain(None, {"catalog": object()}))


def test_invalid_format_is_an_error():
    with pytest.raises(ValueError):
        get_display_format(_chain({"display_format": "xml"}))
