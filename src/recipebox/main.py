"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn recipebox.main:app --reload

    # Production
    uvicorn recipebox.main:app --host 0.0.0.0 --workers 4
"""

from recipebox.factory import create_app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    from recipebox.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "recipebox.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )
