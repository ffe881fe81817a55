from freetable_mcp.server import create_http_app, initialize


def main() -> None:  # pragma: no cover
    app = initialize()

    from freetable_mcp.config import get_settings

    settings = get_settings()

    if settings.uses_http:
        import uvicorn

        uvicorn.run(create_http_app(app), host=settings.mcp_host, port=settings.mcp_port)
    else:
        app.run()


if __name__ == "__main__":  # pragma: no cover
    main()
