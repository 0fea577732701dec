from __future__ import annotations

import pytest

from unienv.core.versioning import compare_versions, more_than


@pytest.mark.parametrize("version", ["1.30.0", "12.0.0", "1.0", "3.13.0rc1", "7"])
def test_more_than_is_reflexive(version: str) -> None:
    assert more_than(version, version)


def test_more_than_compares_numerically() -> None:
    assert more_than("1.2.0", "1.10.0")
    assert not more_than("1.10.0", "1.2.0")


def test_more_than_pads_missing_segments() -> None:
    assert more_than("2.0", "2.0.0")
    assert more_than("2.0.0", "2")
    assert more_than("1.9.9", "2.0")
    assert not more_than("2.0", "1.9.9")


def test_more_than_rejects_older_current() -> None:
    assert not more_than("3.8.0", "3.7.17")
    assert more_than("3.8.0", "3.12.1")


def test_compare_versions_ignores_prerelease_suffix() -> None:
    assert compare_versions("3.13.0rc1", "3.13.0") == 0
    assert compare_versions("3.13.0rc1", "3.12.9") == 1
