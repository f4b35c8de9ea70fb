import logging

import uvicorn

from calc_api.core.config import get_settings
from calc_api.main import app


def run() -> None:
    settings = get_settings()
    logger = logging.getLogger("calc_api")
    base = f"http://localhost:{settings.port}"
    logger.info("server starting on %s:%s", settings.host, settings.port)
    logger.info("documentation: %s/", base)
    logger.info("conversion: %s/convert?from=EUR&to=USD&amount=100", base)
    logger.info("tva: %s/tva?ht=100&taux=20", base)
    logger.info("remise: %s/remise?prix=100&pourcentage=10", base)
    # log_config=None keeps the JSON handler installed by create_app
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
