import hashlib
from urllib.parse import quote_plus
from rmtrackers.torrent.metainfo import MetaInfo


class InfoHash:
    """SHA-1 of the bencoded info dictionary, in raw and hex form."""

    __slots__ = ("bytes", "hex")

    def __init__(self, digest: bytes):
        self.bytes = digest
        self.hex = digest.hex()

    def __eq__(self, other):
        return isinstance(other, InfoHash) and self.bytes == other.bytes

    def __hash__(self):
        return hash(self.bytes)

    def __str__(self):
        return self.hex

    def __repr__(self):
        return f"InfoHash({self.hex})"


def extract_name(metainfo: MetaInfo) -> str:
    return metainfo.unmarshal_info().name


def total_size(metainfo: MetaInfo) -> int:
    return metainfo.unmarshal_info().total_length


def info_hash(metainfo: MetaInfo) -> InfoHash:
    return InfoHash(hashlib.sha1(metainfo.info_bytes).digest())


def magnet_link(infohash: InfoHash, name: str, size: int) -> str:
    parts = [f"magnet:?xt=urn:btih:{infohash.hex}"]
    if name:
        parts.append(f"dn={quote_plus(name)}")
    parts.append(f"xl={size}")
    return "&".join(parts)
