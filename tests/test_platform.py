import os
import time

import pytest

from luna.platform import get_file_metadata, get_hostname, get_timezone_offset


@pytest.fixture
def restore_tz():
    old = os.environ.get("TZ")
    yield
    if old is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = old
    time.tzset()


def test_hostname_is_trimmed_and_nonempty():
    host = get_hostname()
    assert host
    assert host == host.strip()


def test_timezone_offset_utc(restore_tz):
    os.environ["TZ"] = "UTC"
    assert get_timezone_offset() == 0


def test_timezone_offset_west_of_utc(restore_tz):
    os.environ["TZ"] = "EST5EDT"
    assert get_timezone_offset() == -18000


def test_file_metadata_size(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"hello world")
    meta = get_file_metadata(path.stat())
    assert meta.size == 11


def test_file_metadata_mode_and_ownership(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("x")
    path.chmod(0o640)
    st = path.stat()
    meta = get_file_metadata(st)
    assert meta.mode == "640"
    assert meta.ino == st.st_ino
    assert meta.uid == st.st_uid
    assert meta.gid == st.st_gid