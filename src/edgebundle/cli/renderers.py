"""
JSON output renderer.

Every command that supports `--json` emits the same envelope:

    {"meta": {"command": ..., "status": "success", "version": ...},
     "data": {...}, "error": null}

While a command runs inside `capture()`, anything it prints is swallowed
so stdout carries nothing but the envelope.
"""

import contextlib
import io
import json
from typing import Iterator

import click
from pydantic import BaseModel

from .. import __version__
from ..core.exceptions import DataLoadError, EdgeBundleError


class JsonRenderer:
    def __init__(self, command: str):
        self.command = command

    @contextlib.contextmanager
    def capture(self) -> Iterator[io.StringIO]:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            yield buffer

    def _meta(self, status: str) -> dict:
        return {"command": self.command, "status": status, "version": __version__}

    def render_success(self, data: BaseModel) -> None:
        click.echo(json.dumps({
            "meta": self._meta("success"),
            "data": data.model_dump(mode="json"),
            "error": None,
        }))

    def render_error(self, error: Exception) -> None:
        if isinstance(error, DataLoadError):
            code = "DATA_LOAD_FAILED"
        elif isinstance(error, EdgeBundleError):
            code = "EDGEBUNDLE_ERROR"
        else:
            code = "INTERNAL_ERROR"
        click.echo(json.dumps({
            "meta": self._meta("error"),
            "data": None,
            "error": {"code": code, "message": str(error), "type": type(error).__name__},
        }))
