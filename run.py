"""Start the admin API with uvicorn using the configured host and port.

Usage:
    python run.py
"""
import uvicorn

from khs_admin.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "khs_admin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
