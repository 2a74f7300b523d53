"""Render command results as JSON on stdout."""

import click
from pydantic import BaseModel


def echo_json(model: BaseModel) -> None:
    """Print `model` as one line of camelCase JSON.

    Uses the same aliases as the HTTP API so CLI output can be piped into
    tools written against the API.
    """
    click.echo(model.model_dump_json(by_alias=True))
