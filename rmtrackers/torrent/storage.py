import os
from pathlib import Path
from rmtrackers.common.errors import PathError, TorrentIOError
from rmtrackers.torrent.metainfo import MetaInfo
import logging

logger = logging.getLogger(__name__)


def validate_input_file(path: str | Path) -> Path:
    """Resolve the torrent path; it must exist and be a regular file."""
    try:
        file_path = Path(path).expanduser().resolve()
    except (OSError, RuntimeError) as err:
        raise PathError(f"error resolving file path: {err}") from err

    if not file_path.exists():
        raise PathError(f"file does not exist: {file_path}")
    if file_path.is_dir():
        raise PathError(f"expected a file but got a directory: {file_path}")
    return file_path


def _ends_with_separator(output: str) -> bool:
    return output.endswith(os.sep) or bool(os.altsep and output.endswith(os.altsep))


def resolve_output_path(output: str | Path, file_name: str) -> Path:
    """Pick the file the modified torrent is written to.

    A trailing separator, an existing directory, or a missing path without
    an extension all mean "directory": the original file name is appended.
    Anything else is used as the output file itself.
    """
    output_str = os.fspath(output)
    output_path = Path(output_str)

    if _ends_with_separator(output_str) or output_path.is_dir():
        return output_path / file_name
    if not output_path.exists() and not output_path.suffix:
        return output_path / file_name
    return output_path


def save_modified_file(
    metainfo: MetaInfo,
    original_path: str | Path,
    output: str | Path,
) -> Path:
    new_path = resolve_output_path(output, Path(original_path).name)

    try:
        new_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise TorrentIOError(f"failed to create directory: {err}") from err

    # encode before opening so a failed encode never truncates an existing file
    data = metainfo.to_bytes()

    logger.info(f"Writing modified torrent: {new_path}")
    try:
        f = new_path.open("wb")
    except OSError as err:
        raise TorrentIOError(f"failed to create file: {err}") from err
    with f:
        try:
            f.write(data)
        except OSError as err:
            raise TorrentIOError(f"failed to write to file: {err}") from err

    return new_path.resolve()
