"""
Run the API with uvicorn: python -m dreamvacation
"""
import uvicorn

from dreamvacation.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "dreamvacation.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
