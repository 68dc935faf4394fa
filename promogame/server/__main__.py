"""Run the server with uvicorn: ``python -m promogame.server`` or ``promogame-server``."""

import uvicorn

from promogame.server.core.config import settings


def main() -> None:
    uvicorn.run(
        "promogame.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
