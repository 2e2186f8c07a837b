"""Run the storefront API: ``python -m storefront``."""
import logging

import uvicorn
from dotenv import load_dotenv

logger = logging.getLogger("storefront")


def main() -> None:
    # .env must be loaded before settings and the engine read the environment
    load_dotenv()

    from storefront.utils.settings import refresh_settings_cache, get_settings

    refresh_settings_cache()
    settings = get_settings()

    from storefront.api.main import app

    if settings.db_sync:
        from storefront.db.migrate import upgrade_to_head

        upgrade_to_head()

    logger.info("Starting storefront API on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
