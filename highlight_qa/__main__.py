"""
Allow running as: python -m highlight_qa
"""
import uvicorn

from highlight_qa.core.config import get_settings
from highlight_qa.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,
    )


if __name__ == "__main__":
    main()
