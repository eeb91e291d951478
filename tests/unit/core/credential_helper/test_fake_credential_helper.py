"""Tests for FakeCredentialHelper."""

import pytest

from git_github.core.credential_helper.fake import FakeCredentialHelper
from git_github.core.errors import IncompleteCredentialResponse


def test_fill_applies_required_key_check() -> None:
    helper = FakeCredentialHelper(responses={"https://github.com": {"username": "alice"}})

    with pytest.raises(IncompleteCredentialResponse):
        helper.fill("https://github.com")

    assert helper.filled == ["https://github.com"]


def test_reject_is_tracked() -> None:
    helper = FakeCredentialHelper()

    helper.reject("https://github.com")

    assert helper.rejected == ["https://github.com"]
