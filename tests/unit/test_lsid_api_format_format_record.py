"""Unit tests for lsid.api.format.format_record."""

import importlib
import os

import pytest

from lsid.api.config import DisplayConfig
from lsid.api.format import HashComputationError, UnavailableOwnerInfo, file_content_id, format_record
from lsid.api.listing import read_record

MTIME = 1700000000  # 2023-11-14 22:13:20 UTC


def _record(path):
    return read_record(str(path))


def test_regular_file_name_only(tmp_path):
    path = tmp_path / "file.txt"
    path.write_bytes(b"hello")
    assert format_record(_record(path), DisplayConfig()) == str(path)


def test_directory_gets_trailing_separator(tmp_path):
    line = format_record(_record(tmp_path), DisplayConfig())
    assert line == str(tmp_path) + os.sep


def test_size_of_regular_file(tmp_path):
    path = tmp_path / "big"
    path.write_bytes(b"x" * 1234567)
    line = format_record(_record(path), DisplayConfig(show_size=True))
    assert line == f"{path}\tsize:1.234.567"


def test_size_of_directory_is_marker(tmp_path):
    line = format_record(_record(tmp_path), DisplayConfig(show_size=True))
    assert line.split("\t")[1] == "size:dir"


def test_symlink_line(tmp_path):
    target = tmp_path / "target"
    target.write_bytes(b"abc")
    link = tmp_path / "link"
    link.symlink_to("target")

    line = format_record(_record(link), DisplayConfig(show_symlink=True, show_size=True))

    assert line == f"{link}\tsymlink:target\tsize:symlink"


def test_symlink_to_directory_has_no_trailing_separator(tmp_path):
    (tmp_path / "dir").mkdir()
    link = tmp_path / "link"
    link.symlink_to(tmp_path / "dir")

    line = format_record(_record(link), DisplayConfig(show_size=True))

    assert line == f"{link}\tsize:symlink"


def test_symlink_target_hidden_when_disabled(tmp_path):
    link = tmp_path / "link"
    link.symlink_to("nowhere")
    assert format_record(_record(link), DisplayConfig()) == str(link)


def test_mode_is_four_digit_octal(tmp_path):
    path = tmp_path / "f"
    path.write_text("x")
    path.chmod(0o640)
    line = format_record(_record(path), DisplayConfig(show_mode=True))
    assert line == f"{path}\tmode:0640"


@pytest.mark.skipif(os.name != "posix", reason="POSIX ownership only")
def test_owner_posix(tmp_path):
    path = tmp_path / "f"
    path.write_text("x")
    st = os.lstat(path)
    line = format_record(_record(path), DisplayConfig(show_owner=True))
    assert line == f"{path}\towner:{st.st_uid}/{st.st_gid}"


def test_owner_unavailable(tmp_path):
    path = tmp_path / "f"
    path.write_text("x")
    line = format_record(_record(path), DisplayConfig(show_owner=True), UnavailableOwnerInfo())
    assert line == f"{path}\towner:-1/-1"


def test_mtime(tmp_path):
    path = tmp_path / "f"
    path.write_text("x")
    os.utime(path, (MTIME, MTIME))
    line = format_record(_record(path), DisplayConfig(show_time=True))
    assert line == f"{path}\tmtime:23.1114.2213"


def test_cid_for_regular_file(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"hello")
    line = format_record(_record(path), DisplayConfig(show_cid=True))
    assert line == f"{path}\tcid:{file_content_id(str(path))}"


def test_no_cid_for_directory_or_symlink(tmp_path):
    link = tmp_path / "link"
    (tmp_path / "f").write_bytes(b"hello")
    link.symlink_to("f")
    config = DisplayConfig(show_cid=True)

    assert "cid:" not in format_record(_record(tmp_path), config)
    assert "cid:" not in format_record(_record(link), config)


def test_cid_failure_is_logged_and_line_still_printed(tmp_path, monkeypatch, capsys):
    path = tmp_path / "f"
    path.write_bytes(b"hello")
    module = importlib.import_module("lsid.api.format.format_record")

    def fail(p):
        raise HashComputationError(p, PermissionError(13, "Permission denied"))

    monkeypatch.setattr(module, "file_content_id", fail)

    line = format_record(_record(path), DisplayConfig(show_size=True, show_cid=True))

    assert line == f"{path}\tsize:5"
    assert f"cannot hash {path}: Permission denied" in capsys.readouterr().err


def test_field_order(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"hello")
    path.chmod(0o644)
    os.utime(path, (MTIME, MTIME))
    config = DisplayConfig(
        show_symlink=True, show_mode=True, show_owner=True, show_size=True, show_time=True, show_cid=True
    )

    fields = format_record(_record(path), config, UnavailableOwnerInfo()).split("\t")

    assert fields[0] == str(path)
    assert [f.split(":", 1)[0] for f in fields[1:]] == ["mode", "owner", "size", "mtime", "cid"]
    assert fields[1:5] == ["mode:0644", "owner:-1/-1", "size:5", "mtime:23.1114.2213"]


def test_tab_in_name_is_escaped(tmp_path):
    path = tmp_path / "a\tb"
    path.write_text("x")
    line = format_record(_record(path), DisplayConfig(show_size=True))
    assert line == f"{tmp_path}{os.sep}a\\\tb\tsize:1"
