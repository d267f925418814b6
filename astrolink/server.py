"""Console entrypoint: serve the proxy with uvicorn."""

from __future__ import annotations

import uvicorn

from astrolink.config import settings


def main() -> None:
    uvicorn.run(
        "astrolink.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the JSON logging configured by the app
        reload=settings.debug and not settings.is_production,
    )


if __name__ == "__main__":
    main()
