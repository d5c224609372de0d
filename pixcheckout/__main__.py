import logging

import uvicorn

from pixcheckout.logging import configure_logging
from pixcheckout.settings import settings

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    logger.info("Starting server on %s:%s (%s)", settings.host, settings.port, settings.environment)
    uvicorn.run("web.app:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
