class FileEntry:
    __slots__ = ("path", "length")

    def __init__(self, path: list[str], length: int):
        self.path = path
        self.length = length

    def __repr__(self):
        return f"FileEntry(path={self.path!r}, length={self.length})"


class Info:
    """Parsed view of the ``info`` dictionary of a torrent."""

    __slots__ = ("name", "length", "files")

    def __init__(self, name: str, length: int | None, files: list[FileEntry]):
        self.name = name
        self.length = length
        self.files = files

    @property
    def total_length(self) -> int:
        # single-file torrents carry their size in "length", not in "files"
        if self.length is not None:
            return self.length
        return sum(f.length for f in self.files)

    def __repr__(self):
        return f"Info(name={self.name!r}, total_length={self.total_length}, files={len(self.files)})"
