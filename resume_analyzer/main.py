import uvicorn

from resume_analyzer.api.app import create_app
from resume_analyzer.config.settings import Settings
from resume_analyzer.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build dependencies -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)

    app = create_app(settings)
    Log.info(
        f"Starting resume analyzer on {settings.host}:{settings.port} "
        f"(provider={settings.analysis_provider}, pdf_engine={settings.pdf_engine})"
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
