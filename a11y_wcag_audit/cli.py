"""Typer CLI for auditing a page and printing the report."""
from pathlib import Path
from typing import Optional

import orjson
import typer
from dotenv import load_dotenv

from . import browser, probe
from .checklist import MANUAL_CHECKLIST, usage_banner
from .config import ConfigError, load_settings
from .report import exit_code, render_report

# loading variables from .env file
load_dotenv()

app = typer.Typer(add_completion=False)


@app.command()
def audit(
    url: Optional[str] = typer.Argument(None, help="Page to audit (default http://localhost:3000)."),
    config_file: Optional[str] = typer.Option(None, "--config", help="YAML settings file."),
    axe_path: Optional[str] = typer.Option(None, help="Path to axe.min.js (default node_modules/axe-core/axe.min.js)."),
    timeout_ms: Optional[int] = typer.Option(None, help="Navigation timeout in milliseconds."),
    browser_name: Optional[str] = typer.Option(None, "--browser", help="chromium, firefox or webkit."),
    min_target_size: Optional[int] = typer.Option(None, help="Minimum touch target size in CSS pixels."),
    json_out: Optional[str] = typer.Option(None, help="Also write the full results as JSON to this file."),
):
    """Run axe-core WCAG 2.0 A/AA checks against URL and print a report.

    Exits 1 when any violation is found or the audit fails, 0 otherwise. If
    Playwright or axe-core is missing, prints a manual checklist and exits 0.
    """
    try:
        settings = load_settings(
            config_file,
            url=url,
            axe_path=axe_path,
            timeout_ms=timeout_ms,
            browser=browser_name,
            min_target_size=min_target_size,
            json_out=json_out,
        )
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    capability = probe.detect(settings.axe_path)
    if isinstance(capability, probe.Unavailable):
        typer.echo(usage_banner(capability.reason))
        typer.echo(MANUAL_CHECKLIST)
        raise typer.Exit(code=0)

    typer.echo(f"Auditing {settings.url} ...")
    try:
        outcome = browser.run_audit(capability, settings.url, settings)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(render_report(outcome, settings.min_target_size))
    if settings.json_out:
        out = Path(settings.json_out)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_bytes(orjson.dumps(outcome.model_dump(), option=orjson.OPT_INDENT_2))
        except OSError as e:
            typer.echo(f"Error writing {out}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Results written to {out}")
    raise typer.Exit(code=exit_code(outcome))


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
