# storage_api/__main__.py
import uvicorn

from storage_api.config import settings
from storage_api.logging_config import setup_logging


def main() -> None:
    setup_logging()
    uvicorn.run(
        "storage_api.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_config=None,  # keep the Rich handler installed above
    )


if __name__ == "__main__":
    main()
