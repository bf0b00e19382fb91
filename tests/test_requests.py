"""Tests for operation request records"""

import pytest
from pydantic import ValidationError

from tmuxmcp.models import (
    GetPaneContentsRequest,
    GetWindowContentsRequest,
    ListSessionsRequest,
    ListWindowsRequest,
)


def test_defaults():
    """Every field is optional"""
    assert ListSessionsRequest().verbose is False
    assert ListWindowsRequest().session is None
    assert GetPaneContentsRequest().target is None
    assert GetPaneContentsRequest().scroll_back_lines == 1000
    assert GetWindowContentsRequest().scroll_back_lines == 1000


def test_zero_scroll_back_allowed():
    assert GetPaneContentsRequest(scroll_back_lines=0).scroll_back_lines == 0


@pytest.mark.parametrize("model", [GetPaneContentsRequest, GetWindowContentsRequest])
def test_negative_scroll_back_rejected(model):
    with pytest.raises(ValidationError):
        model(scroll_back_lines=-5)


def test_from_json():
    request = ListWindowsRequest.model_validate({"session": "API", "verbose": True})
    assert request.session == "API"
    assert request.verbose is True
