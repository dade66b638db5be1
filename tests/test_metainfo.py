import bencodepy
import pytest

from conftest import MULTI_FILE_INFO, SINGLE_FILE_INFO, make_torrent
from rmtrackers.common.errors import DecodeError, EncodeError, TorrentIOError
from rmtrackers.torrent.metainfo import MetaInfo


class TestDecode:
    def test_reads_top_level_fields(self, single_file_bytes):
        m = MetaInfo.from_bytes(single_file_bytes)
        assert m.announce == "http://tracker.example/announce"
        assert m.announce_list == [
            ["http://tracker.example/announce"],
            ["udp://tracker.other:1337/announce", "udp://backup.other:80"],
        ]
        assert m.created_by == "mktorrent 1.1"
        assert m.comment == "original comment"

    def test_info_bytes_are_the_bencoded_info_dict(self, single_file_bytes):
        m = MetaInfo.from_bytes(single_file_bytes)
        assert m.info_bytes == bencodepy.encode(SINGLE_FILE_INFO)

    def test_missing_fields_read_as_empty(self, trackerless_bytes):
        m = MetaInfo.from_bytes(trackerless_bytes)
        assert m.announce == ""
        assert m.announce_list == []

    def test_malformed_bencode(self):
        with pytest.raises(DecodeError):
            MetaInfo.from_bytes(b"xyz")

    def test_root_must_be_a_dictionary(self):
        with pytest.raises(DecodeError, match="root is not a dictionary"):
            MetaInfo.from_bytes(b"i42e")

    def test_missing_info(self):
        with pytest.raises(DecodeError, match="missing info"):
            MetaInfo.from_bytes(b"d8:announce3:urle")

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(TorrentIOError):
            MetaInfo.load(tmp_path / "nope.torrent")

    def test_load_from_disk(self, torrent_file):
        m = MetaInfo.load(torrent_file)
        assert m.unmarshal_info().name == "example.iso"


class TestUnmarshalInfo:
    def test_single_file(self, single_file_bytes):
        info = MetaInfo.from_bytes(single_file_bytes).unmarshal_info()
        assert info.name == "example.iso"
        assert info.length == 1048576
        assert info.total_length == 1048576
        assert [f.path for f in info.files] == [["example.iso"]]

    def test_multi_file(self, multi_file_bytes):
        info = MetaInfo.from_bytes(multi_file_bytes).unmarshal_info()
        assert info.total_length == 3500
        assert [f.path for f in info.files] == [["docs", "readme.txt"], ["data.bin"]]

    def test_empty_file_list(self):
        info_dict = {**MULTI_FILE_INFO, b"files": []}
        info = MetaInfo.from_bytes(make_torrent(info_dict)).unmarshal_info()
        assert info.total_length == 0

    def test_unused_fields_are_not_validated(self):
        info_dict = {b"length": 5, b"name": b"ok.iso", b"piece length": 16, b"pieces": b"x" * 19}
        info = MetaInfo.from_bytes(make_torrent(info_dict)).unmarshal_info()
        assert info.name == "ok.iso"
        assert info.total_length == 5

    def test_path_segments_must_be_strings(self):
        m = MetaInfo.from_bytes(make_torrent({**MULTI_FILE_INFO, b"files": [{b"length": 1, b"path": [1]}]}))
        with pytest.raises(DecodeError, match="file path segment is not a string"):
            m.unmarshal_info()

    @pytest.mark.parametrize(
        "bad",
        [
            {b"name": 5},
            {b"files": b"not a list"},
            {b"files": [{b"path": [b"x"]}]},
        ],
    )
    def test_malformed_info(self, bad):
        info_dict = {**MULTI_FILE_INFO, **bad}
        m = MetaInfo.from_bytes(make_torrent(info_dict))
        with pytest.raises(DecodeError):
            m.unmarshal_info()


class TestEncode:
    def test_cleared_trackers_are_omitted(self, single_file_bytes):
        m = MetaInfo.from_bytes(single_file_bytes)
        m.announce = ""
        m.announce_list = None
        decoded = bencodepy.decode(m.to_bytes())
        assert b"announce" not in decoded
        assert b"announce-list" not in decoded

    def test_unencodable_value(self, single_file_bytes):
        m = MetaInfo.from_bytes(single_file_bytes)
        m._root[b"comment"] = object()
        with pytest.raises(EncodeError):
            m.to_bytes()
