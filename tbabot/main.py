import argparse
import asyncio
import logging
import signal
import sys
from typing import List, Optional

from pydantic import ValidationError

from tbabot.bot.setup import LifecycleError, create_bot
from tbabot.config import Settings

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Discord bot for The Blue Alliance")
    parser.add_argument(
        "--remove",
        action="store_true",
        help="Remove the registered commands on shutdown",
    )
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings()
    if args.remove:
        settings = settings.model_copy(update={"remove_commands": True})
    return settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def run(settings: Settings) -> None:
    lifecycle = create_bot(settings)

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    await lifecycle.run(settings.discord_bot_token, stop)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args)
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical("Invalid bot parameters: %s", e)
        return 1

    configure_logging(settings)
    logger.info("Starting TBA bot...")
    try:
        asyncio.run(run(settings))
    except LifecycleError:
        logger.critical("Bot stopped on a fatal error", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
