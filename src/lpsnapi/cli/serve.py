"""CLI command to run the lpsnapi web service under uvicorn."""

import click
import uvicorn


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", type=int, default=8000, show_default=True, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Reload on code changes (development only)")
def serve(host: str, port: int, reload: bool) -> None:
    """Serve the bacteria lookup API."""
    uvicorn.run("lpsnapi.web.main:app", host=host, port=port, reload=reload, access_log=False)


def main() -> None:
    """Entry point for the CLI."""
    serve()


if __name__ == "__main__":
    main()
