from rmtrackers.common.config import Config
from rmtrackers.torrent.metainfo import MetaInfo
import logging

logger = logging.getLogger(__name__)


def collect_trackers(metainfo: MetaInfo) -> list[str]:
    """Every tracker URL in the torrent, announce first, without duplicates."""
    trackers = []
    for url in [metainfo.announce, *(u for tier in metainfo.announce_list for u in tier)]:
        if url and url not in trackers:
            trackers.append(url)
    return trackers


def modify_metadata(
    metainfo: MetaInfo,
    created_by: str,
    comment: str,
    config: Config | None = None,
) -> list[str]:
    """Strip all trackers and stamp a new creator and comment.

    Returns the tracker URLs that were removed.
    """
    removed = collect_trackers(metainfo)

    if config is not None and config.verbose:
        if removed:
            logger.info("Modifying torrent metadata...")
            logger.info("Removing the following trackers:")
            for tracker in removed:
                logger.info(f" - {tracker}")
        else:
            logger.info("Modifying torrent metadata... (no trackers found)")

    metainfo.announce = ""
    metainfo.announce_list = None
    metainfo.created_by = created_by
    metainfo.comment = comment
    return removed
