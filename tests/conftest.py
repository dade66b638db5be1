"""Shared fixtures: small torrents built in memory with bencodepy."""

import bencodepy
import pytest

# keys kept in sorted order so re-encoding is byte-identical
SINGLE_FILE_INFO = {
    b"length": 1048576,
    b"name": b"example.iso",
    b"piece length": 262144,
    b"pieces": b"\x01" * 20 * 4,
}

MULTI_FILE_INFO = {
    b"files": [
        {b"length": 1000, b"path": [b"docs", b"readme.txt"]},
        {b"length": 2500, b"path": [b"data.bin"]},
    ],
    b"name": b"my folder",
    b"piece length": 16384,
    b"pieces": b"\x02" * 20,
}


def make_torrent(info, announce=b"http://tracker.example/announce", announce_list=None, extra=None):
    root = {}
    if announce is not None:
        root[b"announce"] = announce
    if announce_list is not None:
        root[b"announce-list"] = announce_list
    root[b"comment"] = b"original comment"
    root[b"created by"] = b"mktorrent 1.1"
    root[b"creation date"] = 1700000000
    root[b"info"] = info
    root.update(extra or {})
    return bencodepy.encode(dict(sorted(root.items())))


@pytest.fixture
def single_file_bytes():
    return make_torrent(
        SINGLE_FILE_INFO,
        announce_list=[
            [b"http://tracker.example/announce"],
            [b"udp://tracker.other:1337/announce", b"udp://backup.other:80"],
        ],
    )


@pytest.fixture
def multi_file_bytes():
    return make_torrent(MULTI_FILE_INFO)


@pytest.fixture
def trackerless_bytes():
    return make_torrent(SINGLE_FILE_INFO, announce=None)


@pytest.fixture
def torrent_file(tmp_path, single_file_bytes):
    path = tmp_path / "input" / "a.torrent"
    path.parent.mkdir()
    path.write_bytes(single_file_bytes)
    return path
