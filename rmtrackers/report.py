import asyncio
import sys
from pathlib import Path
from typing import TextIO
from rmtrackers.common.errors import RmTrackersError
from rmtrackers.torrent import derive
from rmtrackers.torrent.metainfo import MetaInfo
import logging

logger = logging.getLogger(__name__)


async def _report_name(metainfo: MetaInfo, out: TextIO):
    try:
        name = await asyncio.to_thread(derive.extract_name, metainfo)
    except RmTrackersError as e:
        logger.error(f"Error extracting name from metadata: {e}")
        return
    print(f"File name: {name}", file=out)


async def _report_size(metainfo: MetaInfo, out: TextIO):
    try:
        size = await asyncio.to_thread(derive.total_size, metainfo)
    except RmTrackersError as e:
        logger.error(f"Error calculating total size: {e}")
        return
    print(f"Total size: {size}", file=out)


async def _report_hash(metainfo: MetaInfo, out: TextIO):
    infohash = await asyncio.to_thread(derive.info_hash, metainfo)
    print(f"Info hash: {infohash.hex}", file=out)

    # the magnet link still gets written when the info dict is malformed
    try:
        info = await asyncio.to_thread(metainfo.unmarshal_info)
        name, size = info.name, info.total_length
    except RmTrackersError as e:
        logger.warning(f"Magnet link without name and size: {e}")
        name, size = "", 0
    print(f"Magnet link: {derive.magnet_link(infohash, name, size)}", file=out)


async def process_metainfo(metainfo: MetaInfo, out: TextIO | None = None):
    """Print name, size, hash and magnet link; one failure never hides the rest."""
    out = out if out is not None else sys.stdout
    await asyncio.gather(
        _report_name(metainfo, out),
        _report_size(metainfo, out),
        _report_hash(metainfo, out),
    )


def report(metainfo: MetaInfo, saved_path: Path, out: TextIO | None = None):
    out = out if out is not None else sys.stdout
    asyncio.run(process_metainfo(metainfo, out))
    print(f"Modified torrent saved as: {saved_path}", file=out)
