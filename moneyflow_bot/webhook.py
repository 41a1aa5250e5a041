"""aiohttp server receiving Telegram webhook updates."""

import asyncio
import logging
import secrets
from datetime import datetime, timezone

from aiohttp import web
from telegram import Update
from telegram.ext import Application

from moneyflow_bot.config import (
    DATABASE_PATH,
    HOST,
    PORT,
    TELEGRAM_BOT_TOKEN,
    WEBHOOK_URL,
)
from moneyflow_bot.messages import COURSE_NAME

logger = logging.getLogger(__name__)

APPLICATION_KEY = web.AppKey("application", Application)


def webhook_path(token: str) -> str:
    return f"/webhook/{token}"


def webhook_url(base_url: str, token: str) -> str:
    return base_url.rstrip("/") + webhook_path(token)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


async def handle_update(request: web.Request) -> web.Response:
    application = request.app[APPLICATION_KEY]

    token = request.match_info["token"].encode()
    if not secrets.compare_digest(token, application.bot.token.encode()):
        logger.warning("Webhook hit with an invalid token path")
        return web.json_response({"error": "Forbidden"}, status=403)

    try:
        data = await request.json()
    except ValueError:
        logger.warning("Webhook received a non-JSON body")
        return web.json_response({"error": "Invalid JSON"}, status=400)

    if not isinstance(data, dict):
        logger.warning("Webhook received a JSON body that is not an object")
        return web.json_response({"error": "Invalid update"}, status=400)

    try:
        update = Update.de_json(data, application.bot)
        await application.process_update(update)
    except Exception as e:
        logger.error(f"Error processing webhook update: {e}", exc_info=True)
        return web.json_response({"error": "Failed to process update"}, status=500)

    logger.debug(f"Update {data.get('update_id')} processed successfully")
    return web.json_response({"status": "ok"})


async def handle_index(request: web.Request) -> web.Response:
    _ = request
    return web.json_response(
        {
            "status": f"{COURSE_NAME} Bot",
            "timestamp": _now(),
            "webhook_url": WEBHOOK_URL or None,
            "webhook_configured": bool(WEBHOOK_URL),
        }
    )


async def handle_health(request: web.Request) -> web.Response:
    _ = request
    return web.json_response(
        {
            "status": "healthy",
            "timestamp": _now(),
            "environment": {
                "BOT_TOKEN": "configured" if TELEGRAM_BOT_TOKEN else "missing",
                "DATABASE_PATH": DATABASE_PATH,
            },
        }
    )


def create_web_app(application: Application) -> web.Application:
    app = web.Application()
    app[APPLICATION_KEY] = application

    app.router.add_post("/webhook/{token}", handle_update)
    app.router.add_get("/", handle_index)
    app.router.add_get("/health", handle_health)

    return app


async def register_webhook(application: Application, base_url: str) -> None:
    url = webhook_url(base_url, application.bot.token)

    await application.bot.delete_webhook()
    logger.info("Deleted existing webhook")

    await application.bot.set_webhook(url=url, allowed_updates=Update.ALL_TYPES)
    info = await application.bot.get_webhook_info()
    logger.info(f"Webhook set, pending updates: {info.pending_update_count}")


async def run_webhook(
    application: Application,
    base_url: str = WEBHOOK_URL,
    host: str = HOST,
    port: int = PORT,
) -> None:
    """Serve webhook updates until cancelled."""
    if not base_url:
        raise ValueError("WEBHOOK_URL is not configured")

    async with application:
        await application.start()
        await register_webhook(application, base_url)

        runner = web.AppRunner(create_web_app(application))
        await runner.setup()
        site = web.TCPSite(runner, host, port)
        await site.start()
        logger.info(f"Webhook server running on {host}:{port}")

        try:
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()
            await application.stop()
            logger.info("Webhook server stopped")
