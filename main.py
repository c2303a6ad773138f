"""
Vending Machine Service - Main entry point.

Stocks a vending machine from the bundled inventory resource and serves
commands received over Redis pub/sub.
"""

import asyncio
import json
from typing import Any, Optional

from redis.asyncio import Redis

from application.api_facade import VendingMachineFacade
from application.command_handler import CommandHandler
from core.exceptions import InventoryError
from infrastructure.settings import Settings, get_settings
from loggers import logger


# =============================================================================
# Redis Command Listener
# =============================================================================


async def handle_message(
    redis: Redis,
    handler: CommandHandler,
    raw_data: Any,
    response_channel: str,
) -> Optional[dict[str, Any]]:
    """
    Execute one raw command message and publish the response.

    Returns:
        The published response, or None if the message was not a command.
    """
    if raw_data == "ping":
        return None

    try:
        command = json.loads(raw_data)
    except (json.JSONDecodeError, TypeError) as e:
        logger.error(f"Command parsing error: {e}")
        return None

    if not isinstance(command, dict):
        logger.error(f"Command must be a JSON object, got: {raw_data}")
        return None

    logger.info(f"Received command: {command}")
    response = await handler.execute(command)

    await redis.publish(response_channel, json.dumps(response))
    logger.info(f"Response sent to {response_channel}: {response}")
    return response


async def listen_to_redis(redis: Redis, handler: CommandHandler, settings: Settings) -> None:
    """
    Listen for commands on Redis pub/sub and process them.

    Args:
        redis: Redis client instance.
        handler: Command handler bound to the vending machine facade.
        settings: Application settings.
    """
    command_channel = settings.commands.command_channel
    response_channel = settings.commands.response_channel

    pubsub = redis.pubsub()
    await pubsub.subscribe(command_channel)
    logger.info(f"Listening for commands on channel: {command_channel}")

    async for message in pubsub.listen():
        if message.get("type") != "message":
            continue

        try:
            await handle_message(redis, handler, message.get("data"), response_channel)
        except Exception as e:
            logger.error(f"Unexpected error processing command: {e}")


# =============================================================================
# Main Entry Point
# =============================================================================


async def main() -> None:
    """
    Main entry point for the vending machine service.

    Loads the inventory, connects to Redis and starts the command listener.
    """
    settings = get_settings()

    try:
        api = VendingMachineFacade.from_settings(settings)
    except InventoryError as e:
        logger.error(f"Cannot load inventory ({e.code}): {e.message}")
        return

    redis = Redis(
        host=settings.redis.host,
        port=settings.redis.port,
        decode_responses=settings.redis.decode_responses,
    )

    try:
        await listen_to_redis(redis, CommandHandler(api), settings)
    finally:
        await redis.aclose()


def run() -> None:
    """Run the service until interrupted."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Application stopped by user")


if __name__ == "__main__":
    run()
