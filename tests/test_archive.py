from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from conftest import MARKDOWN_TEXT, RABBIT_BYTES
from textbundle.bundle.archive import archive, unarchive
from textbundle.bundle.io import read_directory, write_directory
from textbundle.core.model import Document
from textbundle.errors import ConversionError, InvalidDirectoryError


def _bundle(out_dir: Path, rabbit_asset: Path, name: str = "Packed") -> Path:
    return write_directory(Document(name=name, text_content=MARKDOWN_TEXT, asset_paths=[rabbit_asset]), out_dir)


def test_archive_entries_mirror_directory_layout(out_dir: Path, rabbit_asset: Path):
    bundle = _bundle(out_dir, rabbit_asset)

    pack = archive(bundle)

    assert pack == out_dir / "Packed.textpack"
    assert bundle.is_dir(), "archive() must not delete its input"
    with zipfile.ZipFile(pack) as zf:
        names = set(zf.namelist())
        assert {
            "Packed.textbundle/",
            "Packed.textbundle/assets/",
            "Packed.textbundle/info.json",
            "Packed.textbundle/text.markdown",
            "Packed.textbundle/assets/white_rabbit.jpg",
        } == names
        assert zf.getinfo("Packed.textbundle/text.markdown").compress_type == zipfile.ZIP_DEFLATED


def test_archive_reports_monotonic_progress_ending_at_one(out_dir: Path, rabbit_asset: Path):
    bundle = _bundle(out_dir, rabbit_asset)
    seen: list[float] = []

    archive(bundle, progress=seen.append)

    assert seen
    assert seen == sorted(seen)
    assert all(0.0 < x <= 1.0 for x in seen)
    assert seen[-1] == 1.0


def test_archive_without_progress_sink(out_dir: Path, rabbit_asset: Path):
    assert archive(_bundle(out_dir, rabbit_asset), progress=None).is_file()


def test_archive_rejects_missing_input(tmp_path: Path):
    with pytest.raises(InvalidDirectoryError):
        archive(tmp_path / "Nothing.textbundle")


def test_archive_refuses_to_overwrite(out_dir: Path, rabbit_asset: Path):
    bundle = _bundle(out_dir, rabbit_asset)
    (out_dir / "Packed.textpack").write_bytes(b"keep me")

    with pytest.raises(FileExistsError):
        archive(bundle)
    assert (out_dir / "Packed.textpack").read_bytes() == b"keep me"


def test_unarchive_extracts_into_scratch_dir(out_dir: Path, rabbit_asset: Path, scratch_dir: Path):
    pack = archive(_bundle(out_dir, rabbit_asset))

    extracted = unarchive(pack, scratch_dir)

    assert extracted == scratch_dir / "Packed" / "Packed.textbundle"
    assert (extracted / "assets" / "white_rabbit.jpg").read_bytes() == RABBIT_BYTES
    doc = read_directory(extracted)
    assert doc.name == "Packed"
    assert doc.text_content == MARKDOWN_TEXT


def test_unarchive_replaces_previous_extraction(out_dir: Path, rabbit_asset: Path, scratch_dir: Path):
    pack = archive(_bundle(out_dir, rabbit_asset))
    first = unarchive(pack, scratch_dir)
    stale = first / "assets" / "stale.png"
    stale.write_bytes(b"old")

    second = unarchive(pack, scratch_dir)

    assert second == first
    assert not stale.exists()


def test_unarchive_corrupt_archive_raises_codec_error(tmp_path: Path, scratch_dir: Path):
    bad = tmp_path / "Bad.textpack"
    bad.write_bytes(b"this is not a zip file")

    with pytest.raises(zipfile.BadZipFile):
        unarchive(bad, scratch_dir)


def test_unarchive_missing_archive_raises(tmp_path: Path, scratch_dir: Path):
    with pytest.raises(FileNotFoundError):
        unarchive(tmp_path / "Gone.textpack", scratch_dir)


def test_unarchive_without_bundle_dir_raises_conversion_error(tmp_path: Path, scratch_dir: Path):
    flat = tmp_path / "Flat.textpack"
    with zipfile.ZipFile(flat, "w") as zf:
        zf.writestr("info.json", '{"version":2,"type":"t"}')
        zf.writestr("text.markdown", "# flat")

    with pytest.raises(ConversionError):
        unarchive(flat, scratch_dir)


def test_unarchive_prefers_bundle_matching_archive_name(tmp_path: Path, scratch_dir: Path):
    pack = tmp_path / "Second.textpack"
    with zipfile.ZipFile(pack, "w") as zf:
        zf.writestr("First.textbundle/info.json", '{"version":2,"type":"t"}')
        zf.writestr("First.textbundle/text.markdown", "first")
        zf.writestr("Second.textbundle/info.json", '{"version":2,"type":"t"}')
        zf.writestr("Second.textbundle/text.markdown", "second")

    extracted = unarchive(pack, scratch_dir)

    assert extracted.name == "Second.textbundle"
