"""Entry point for the example bot; ``python main.py`` starts long polling.

For webhook delivery serve :func:`bot.webhook.create_app` with an ASGI
server instead.
"""

import asyncio

from bot.dispatcher import run


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
