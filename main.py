import uvicorn

from cms_sdk.config import settings
from cms_sdk.main import create_app
from cms_sdk.middleware.logging import configure_logging

configure_logging(log_level="DEBUG" if settings.debug else "INFO", json_format=settings.log_json)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=7781, reload=settings.debug)
