"""Run the service with uvicorn: ``python -m hello_metrics``."""

import uvicorn

from hello_metrics.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "hello_metrics.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
