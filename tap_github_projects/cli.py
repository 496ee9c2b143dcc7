"""Export the items of a GitHub project board as JSON or CSV.

Usage:
    github-project-export --url https://github.com/orgs/<org>/projects/<n> --format csv

Exit Codes:
    0: Success
    1: The query failed; the reason is printed on stderr
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from tap_github_projects.csv_encoder import CSV_STYLES
from tap_github_projects.errors import ProjectExportError
from tap_github_projects.session import export_csv, export_json, start_query
from tap_github_projects.state import LastProjectStore

logger = logging.getLogger(__name__)


@click.command(name="github-project-export")
@click.option(
    "--url",
    "project_url",
    help="Project board URL. Defaults to the last URL queried.",
)
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub access token.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "csv"]),
    default="json",
    show_default=True,
)
@click.option(
    "--csv-style",
    type=click.Choice(CSV_STYLES),
    default="strip",
    show_default=True,
    help="'strip' removes commas and '#' from cells, 'rfc4180' quotes them.",
)
@click.option("--data-uri", is_flag=True, help="Wrap CSV output in a data: URI.")
@click.option(
    "--lenient-options",
    is_flag=True,
    help="Leave cells empty instead of failing on unknown select options.",
)
@click.option("--api-url-base", default=None, help="GitHub API base URL.")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds.")
@click.option(
    "--state-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File remembering the last project URL.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
def main(
    project_url: str | None,
    token: str | None,
    output_format: str,
    csv_style: str,
    data_uri: bool,
    lenient_options: bool,
    api_url_base: str | None,
    timeout: float | None,
    state_file: Path | None,
    output: Path | None,
) -> None:
    """Query every item of a GitHub project and print it as JSON or CSV."""
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING").upper())
    store = LastProjectStore(state_file)
    if project_url is None:
        project_url = store.load()

    try:
        result = start_query(
            project_url or "",
            token or "",
            store=store,
            api_url_base=api_url_base,
            timeout=timeout,
            strict_option_lookup=not lenient_options,
        )
    except ProjectExportError as exc:
        click.echo(exc.user_message, err=True)
        raise SystemExit(1) from exc

    if output_format == "csv":
        text = export_csv(result, style=csv_style, data_uri=data_uri)
    else:
        text = export_json(result)

    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %d items to %s", len(result.result_set.items), output)


if __name__ == "__main__":
    main()
