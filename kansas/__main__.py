"""Run the API with uvicorn: ``python -m kansas``."""
import uvicorn

from kansas.config import settings


def main() -> None:
    uvicorn.run(
        "kansas.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
