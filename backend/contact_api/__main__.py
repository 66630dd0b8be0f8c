"""Run the Contact API with uvicorn: ``python -m contact_api``."""

import uvicorn

from contact_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "contact_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
