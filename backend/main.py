import logging

import uvicorn

from cookbook_auth.application import create_app
from cookbook_auth.core.config import settings
from cookbook_auth.core.logging_config import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info("Server starting on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
