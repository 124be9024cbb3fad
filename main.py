import json
import logging

import typer

from extension.config import load_config
from extension.content import ContentScript
from extension.errors import AnalysisFailed, ExtensionDisconnected
from extension.messaging import MessageBus
from extension.page import PageSnapshot, fetch_page
from extension.popup import Popup
from extension.profile_scraper import scrape_current_profile
from extension.relay import BackgroundService
from extension.settings_store import SettingsStore

app = typer.Typer(help="Findn AI: networking suggestions for LinkedIn and Instagram profiles")


def _page(page: str, url: str) -> PageSnapshot:
    if page:
        return PageSnapshot.from_file(page, url)
    return PageSnapshot(url=url, html=fetch_page(url))


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


@app.command()
def serve():
    """Run the backend HTTP service."""
    import uvicorn
    from backend.config import load_config as load_server_config

    cfg = load_server_config()
    uvicorn.run("server:app", host=cfg.host, port=cfg.port)


@app.command()
def scrape(url: str = typer.Option(..., "--url", help="URL the page was loaded from"),
           page: str = typer.Argument("", help="Saved HTML page; fetched from --url when omitted")):
    """Print the profile fields scraped from a page."""
    profile = scrape_current_profile(_page(page, url))
    typer.echo(json.dumps(profile.to_wire(), indent=2, ensure_ascii=False))


@app.command()
def analyze(url: str = typer.Option(..., "--url", help="URL the page was loaded from"),
            page: str = typer.Argument("", help="Saved HTML page; fetched from --url when omitted"),
            config: str = typer.Option("", "--config", help="Path to YAML config")):
    """Scrape a profile page and ask the backend for networking suggestions."""
    cfg = load_config(config)
    bus = MessageBus()
    background = BackgroundService.from_config(bus, cfg)
    background.start()
    ContentScript(bus, _page(page, url)).attach()
    try:
        result = Popup(bus, url, cfg).analyze_profile()
    except (AnalysisFailed, ExtensionDisconnected) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        background.stop()
    typer.echo(json.dumps(result.to_wire(), indent=2, ensure_ascii=False))


@app.command()
def status(config: str = typer.Option("", "--config", help="Path to YAML config")):
    """Show whether the backend is reachable."""
    cfg = load_config(config)
    bus = MessageBus()
    background = BackgroundService.from_config(bus, cfg)
    background.start()
    try:
        typer.echo(Popup(bus, "", cfg).backend_status())
    finally:
        background.stop()


@app.command()
def settings(linkedin: bool = typer.Option(None, "--linkedin/--no-linkedin"),
             instagram: bool = typer.Option(None, "--instagram/--no-instagram"),
             config: str = typer.Option("", "--config", help="Path to YAML config")):
    """Show or change which platforms can be analyzed."""
    store = SettingsStore(load_config(config).settings_path)
    current = store.load()
    if linkedin is not None or instagram is not None:
        current = store.save(
            current["linkedinEnabled"] if linkedin is None else linkedin,
            current["instagramEnabled"] if instagram is None else instagram,
        )
    typer.echo(json.dumps(current, indent=2))


if __name__ == "__main__":
    app()
