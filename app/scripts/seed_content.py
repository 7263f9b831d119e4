"""
Seed the default social links and stream channels (the ones the landing page
falls back to) into empty collections. Run from project root:
  python -m app.scripts.seed_content
Collections that already hold rows are left untouched, so re-running is safe.
"""
import logging
import sys

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.schemas.social_links import SocialLinkCreate
from app.schemas.stream_channels import StreamChannelCreate
from app.services.storage import Storage, build_storage

logger = logging.getLogger(__name__)

DEFAULT_SOCIAL_LINKS: list[SocialLinkCreate] = [
    SocialLinkCreate(
        platform="twitch",
        name="Twitch",
        url="https://twitch.tv/remak_official",
        icon="twitch",
        color="#9146FF",
        username="@remak_official",
        description="Live streams & past broadcasts",
        order=1,
    ),
    SocialLinkCreate(
        platform="discord",
        name="Discord",
        url="https://discord.gg/remak",
        icon="discord",
        color="#5865F2",
        username="REMAK Community",
        description="Join our growing community",
        order=2,
    ),
    SocialLinkCreate(
        platform="twitter",
        name="Twitter",
        url="https://twitter.com/remak_official",
        icon="twitter",
        color="#1DA1F2",
        username="@remak_official",
        description="Updates & announcements",
        order=3,
    ),
    SocialLinkCreate(
        platform="instagram",
        name="Instagram",
        url="https://instagram.com/remak_official",
        icon="instagram",
        color="#E1306C",
        username="@remak_official",
        description="Photos & behind the scenes",
        order=4,
    ),
]

DEFAULT_STREAM_CHANNELS: list[StreamChannelCreate] = [
    StreamChannelCreate(
        name="IRL Adventures",
        type="primary",
        description=(
            "Join me as I explore real-world adventures, travel to new destinations, and share "
            "unique experiences. From urban exploration to outdoor activities."
        ),
        platform="twitch",
        url="https://twitch.tv/remak_official",
        color="#9146FF",
        order=1,
    ),
    StreamChannelCreate(
        name="Gaming & Chill",
        type="secondary",
        description=(
            "Relaxed gaming sessions featuring a variety of titles from competitive to casual. "
            "Come hang out, chat, and enjoy some gameplay in a more laid-back environment."
        ),
        platform="twitch",
        url="https://twitch.tv/remak_gaming",
        color="#9146FF",
        order=2,
    ),
]


def seed_content(storage: Storage) -> tuple[int, int]:
    """Insert defaults into empty collections. Returns (social_links_added, stream_channels_added)."""
    links_added = 0
    if not storage.list_social_links():
        for link in DEFAULT_SOCIAL_LINKS:
            storage.create_social_link(link)
        links_added = len(DEFAULT_SOCIAL_LINKS)

    channels_added = 0
    if not storage.list_stream_channels():
        for channel in DEFAULT_STREAM_CHANNELS:
            storage.create_stream_channel(channel)
        channels_added = len(DEFAULT_STREAM_CHANNELS)

    return links_added, channels_added


def main() -> int:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    try:
        links_added, channels_added = seed_content(build_storage(settings))
    except Exception as e:
        logger.exception("Seeding failed: %s", e)
        return 1
    logger.info("Seed completed: social_links_added=%s stream_channels_added=%s", links_added, channels_added)
    return 0


if __name__ == "__main__":
    sys.exit(main())
