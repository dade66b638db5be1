class RmTrackersError(Exception):
    """Base class for every failure raised by the tracker remover."""


class PathError(RmTrackersError):
    """Input or output path could not be resolved or is not usable."""


class DecodeError(RmTrackersError):
    """Malformed bencode, or a metainfo without a usable info dictionary."""


class TorrentIOError(RmTrackersError):
    """Filesystem failure while reading, creating or writing a torrent."""


class EncodeError(RmTrackersError):
    """The modified metainfo could not be serialized back to bencode."""
