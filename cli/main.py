import typer
import uvicorn

from backend.app.config import settings

app = typer.Typer(help="VoteHub - feature request voting board")


@app.command()
def start(reload: bool = typer.Option(False, help="Reload on code changes.")) -> None:
    """Start the VoteHub server."""
    typer.echo(f"Starting VoteHub on {settings.host}:{settings.port}...")
    uvicorn.run(
        "backend.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
