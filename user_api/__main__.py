"""
Server entry point: ``python -m user_api``.
"""
import logging

import uvicorn

from user_api.core.config import get_settings
from user_api.main import create_application


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    
    app = create_application(settings)
    logging.getLogger(__name__).info(f"Server starting on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
