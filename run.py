"""Entry point for the Go Web Server Tutorial site."""

import logging
import sys


def main():
    import uvicorn

    from webtutor.settings import settings

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Server running at http://{settings.HOST}:{settings.PORT}/")
    uvicorn.run(
        "webtutor.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_keep_alive=settings.TIMEOUT_KEEP_ALIVE,
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
