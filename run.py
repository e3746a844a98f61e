"""Start the Event Reminder API with uvicorn for local development."""


def main() -> None:
    import uvicorn

    from src.config import settings

    uvicorn.run(
        "src.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.is_development,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
