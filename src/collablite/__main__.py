import uvicorn

from collablite.log import build_logging_config
from collablite.settings import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "collablite.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level,
        log_config=build_logging_config(settings.log_level),
    )


if __name__ == "__main__":
    main()
