"""ASGI entry point: `uvicorn src.main:app`"""

from src.api.app import create_app
from src.core.config import Settings

settings = Settings.from_env()
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
