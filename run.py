"""Entry point for serving the User Management API.

Host and port are read from environment variables ``API_HOST`` and
``API_PORT``.  Defaults are ``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import os

from uvicorn import Config, Server

from user_management_api.app.main import app


def main() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
