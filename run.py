"""Entry point for the Person API.

Starts the FastAPI application with Uvicorn.  Host, port, log level and
whether to seed the sample people are read from the environment (see
``person_api.app.core.config``), for example::

    SEED_SAMPLE_DATA=true PORT=5000 python run.py
"""
import logging

from uvicorn import Config, Server

from person_api.app.core.config import settings
from person_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
