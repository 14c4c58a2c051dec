"""Main entry point for the panel bot."""

from __future__ import annotations

import asyncio
import logging

import logfire
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties

from panelbot.config import settings
from panelbot.handlers import panels
from panelbot.middlewares import SessionStoreMiddleware
from panelbot.sessions import SessionStore

logfire.configure(
    token=settings.logfire_token,
    service_name=settings.app_name,
    environment=settings.environment,
    send_to_logfire="if-token-present",
)
logfire.instrument_pydantic(record="failure")

logging.basicConfig(
    level=logging.WARNING,
    format="[%(asctime)s][%(name)s][%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logfire.LogfireLoggingHandler(),
    ],
)


async def main() -> None:
    logger = logging.getLogger("Main")

    default = DefaultBotProperties(
        parse_mode="HTML",
        disable_notification=True,
        link_preview_is_disabled=True,
    )

    bot = Bot(
        token=settings.telegram_bot_token,
        default=default,
    )

    bot_info = await bot.get_me()
    logger.info(
        f"Starting bot: {bot_info.full_name} (@{bot_info.username}) [ID: {bot_info.id}]"
    )
    logger.info(f"Environment: {settings.environment}")

    store = SessionStore.from_url(settings.session_cache_url, ttl=settings.session_ttl)

    dp = Dispatcher()
    dp.update.middleware(SessionStoreMiddleware(store))
    dp.include_routers(
        panels.router,
    )

    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await store.close()
        await bot.session.close()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.info("App stopped! Good bye.")
    except Exception:
        logfire.fatal("App crashed", _exc_info=True)
        raise
