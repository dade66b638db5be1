import bencodepy
from bencodepy.exceptions import DecodingError, EncodingError
from pathlib import Path
from rmtrackers.common.errors import DecodeError, EncodeError, TorrentIOError
from rmtrackers.torrent.metadata import FileEntry, Info
import logging

logger = logging.getLogger(__name__)


def _text(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class MetaInfo:
    """Decoded root of a .torrent file.

    Wraps the dictionary produced by ``bencodepy`` (bytes keys, bytes
    strings) and exposes the handful of top-level fields that get edited.
    The bencoded ``info`` dictionary is captured once when the file is
    decoded; the info hash is always computed from those bytes.
    """

    __slots__ = ("_root", "info_bytes")

    def __init__(self, root: dict, info_bytes: bytes):
        self._root = root
        self.info_bytes = info_bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "MetaInfo":
        try:
            root = bencodepy.decode(data)
        except (DecodingError, ValueError, IndexError, KeyError, TypeError) as err:
            raise DecodeError(f"error decoding torrent: {err}") from err

        if not isinstance(root, dict):
            raise DecodeError("error decoding torrent: root is not a dictionary")
        info = root.get(b"info")
        if not isinstance(info, dict):
            raise DecodeError("error decoding torrent: missing info dictionary")

        try:
            info_bytes = bencodepy.encode(info)
        except (EncodingError, TypeError, ValueError) as err:
            raise DecodeError(f"error decoding torrent: {err}") from err
        return cls(root, info_bytes)

    @classmethod
    def load(cls, path: Path) -> "MetaInfo":
        logger.info(f"Loading torrent: {path}")
        try:
            with Path(path).open("rb") as f:
                data = f.read()
        except OSError as err:
            raise TorrentIOError(f"error opening torrent: {err}") from err
        return cls.from_bytes(data)

    @property
    def info(self) -> dict:
        return self._root[b"info"]

    @property
    def announce(self) -> str:
        return _text(self._root.get(b"announce", b""))

    @announce.setter
    def announce(self, value: str):
        if value:
            self._root[b"announce"] = value.encode("utf-8")
        else:
            self._root.pop(b"announce", None)

    @property
    def announce_list(self) -> list[list[str]]:
        tiers = self._root.get(b"announce-list")
        if not isinstance(tiers, list):
            return []
        return [
            [_text(url) for url in tier if isinstance(url, (bytes, str))]
            for tier in tiers
            if isinstance(tier, list)
        ]

    @announce_list.setter
    def announce_list(self, tiers: list[list[str]] | None):
        if tiers:
            self._root[b"announce-list"] = [
                [url.encode("utf-8") for url in tier] for tier in tiers
            ]
        else:
            self._root.pop(b"announce-list", None)

    @property
    def created_by(self) -> str:
        return _text(self._root.get(b"created by", b""))

    @created_by.setter
    def created_by(self, value: str):
        self._root[b"created by"] = value.encode("utf-8")

    @property
    def comment(self) -> str:
        return _text(self._root.get(b"comment", b""))

    @comment.setter
    def comment(self, value: str):
        self._root[b"comment"] = value.encode("utf-8")

    def unmarshal_info(self) -> Info:
        info = self.info

        name = info.get(b"name", b"")
        if not isinstance(name, (bytes, str)):
            raise DecodeError("info: name is not a string")

        files = []
        length = None
        if b"files" in info:
            if not isinstance(info[b"files"], list):
                raise DecodeError("info: files is not a list")
            for file_dict in info[b"files"]:
                if not isinstance(file_dict, dict):
                    raise DecodeError("info: file entry is not a dictionary")
                file_length = file_dict.get(b"length")
                if not isinstance(file_length, int) or file_length < 0:
                    raise DecodeError("info: file entry has no valid length")
                segments = file_dict.get(b"path", [])
                if not isinstance(segments, list):
                    raise DecodeError("info: file path is not a list")
                if not all(isinstance(seg, (bytes, str)) for seg in segments):
                    raise DecodeError("info: file path segment is not a string")
                files.append(FileEntry([_text(seg) for seg in segments], file_length))
        else:
            length = info.get(b"length", 0)
            if not isinstance(length, int) or length < 0:
                raise DecodeError("info: length is not a valid integer")
            files.append(FileEntry([_text(name)], length))

        return Info(name=_text(name), length=length, files=files)

    def to_bytes(self) -> bytes:
        # bencoded dictionaries must have their keys sorted
        root = dict(sorted(self._root.items()))
        try:
            return bencodepy.encode(root)
        except (EncodingError, TypeError, ValueError) as err:
            raise EncodeError(f"error encoding torrent: {err}") from err

