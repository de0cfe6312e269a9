import argparse

import uvicorn

from .app import create_app
from .config import get_settings


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve the recipe app.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
