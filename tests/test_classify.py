from __future__ import annotations

from pathlib import Path

import pytest

from textbundle.core.classify import (
    BundleKind,
    SchemeClass,
    classify_bundle_kind,
    classify_scheme,
    classify_url,
)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("Demo.textbundle", BundleKind.DIRECTORY),
        ("/some/where/Demo.TextBundle", BundleKind.DIRECTORY),
        (Path("notes") / "Demo.textpack", BundleKind.ARCHIVE),
        ("Demo.TEXTPACK", BundleKind.ARCHIVE),
        ("my.notes.textpack", BundleKind.ARCHIVE),
        ("file.xyz", BundleKind.UNKNOWN),
        ("textbundle", BundleKind.UNKNOWN),
        ("Demo.textbundle.zip", BundleKind.UNKNOWN),
        ("https://example.com", BundleKind.UNKNOWN),
    ],
)
def test_classify_bundle_kind(path, expected):
    assert classify_bundle_kind(path) is expected


def test_classify_bundle_kind_does_not_touch_filesystem(tmp_path: Path):
    missing = tmp_path / "nope" / "Demo.textbundle"
    assert classify_bundle_kind(missing) is BundleKind.DIRECTORY
    assert not missing.exists()
    assert not missing.parent.exists()


@pytest.mark.parametrize(
    "token, expected",
    [
        ("https", SchemeClass.NETWORK),
        ("http", SchemeClass.NETWORK),
        ("ftp", SchemeClass.NETWORK),
        ("sftp", SchemeClass.NETWORK),
        ("HTTPS", SchemeClass.UNKNOWN),
        ("File", SchemeClass.UNKNOWN),
        ("Http", SchemeClass.UNKNOWN),
        ("file", SchemeClass.FILESYSTEM),
        ("", SchemeClass.NONE),
        ("mailto", SchemeClass.UNKNOWN),
        ("x-custom", SchemeClass.UNKNOWN),
        (None, SchemeClass.UNKNOWN),
    ],
)
def test_classify_scheme(token, expected):
    assert classify_scheme(token) is expected


def test_classify_is_pure():
    assert [classify_scheme("https") for _ in range(3)] == [SchemeClass.NETWORK] * 3
    assert [classify_bundle_kind("a.textpack") for _ in range(3)] == [BundleKind.ARCHIVE] * 3


def test_scheme_class_values_are_stable():
    assert [int(s) for s in (SchemeClass.UNKNOWN, SchemeClass.NONE, SchemeClass.FILESYSTEM, SchemeClass.NETWORK)] == [
        -1,
        0,
        1,
        2,
    ]


def test_classify_url(tmp_path: Path):
    assert classify_url("https://example.com/a.png") is SchemeClass.NETWORK
    assert classify_url(tmp_path.as_uri()) is SchemeClass.FILESYSTEM
    assert classify_url(tmp_path) is SchemeClass.FILESYSTEM
    # A bare path carries no scheme token at all.
    assert classify_url("/var/thing/whatever") is SchemeClass.UNKNOWN
