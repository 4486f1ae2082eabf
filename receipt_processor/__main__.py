"""Run the API with uvicorn on the configured host and port."""

from __future__ import annotations

import uvicorn

from receipt_processor.core.config import settings


def main() -> None:
    uvicorn.run(
        "receipt_processor.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
