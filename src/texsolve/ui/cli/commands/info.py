"""Read-only commands: titles, subject profiles and prompts."""

from __future__ import annotations

import typer

from texsolve.core.prompts import subject_prompt
from texsolve.core.subjects import iter_subjects
from texsolve.core.templates import get_profile
from texsolve.core.titles import extract_title

from .._options import RawInputArgument, SubjectOption
from ..state import get_cli_state
from ..utils import choose_subject, read_raw_input


def title(input_source: RawInputArgument) -> None:
    """Print the filename-safe title derived from generated text."""
    typer.echo(extract_title(read_raw_input(input_source)))


def subjects() -> None:
    """List the subject profiles and the packages they load."""
    from rich import box
    from rich.table import Table

    table = Table(box=box.SIMPLE, header_style="bold")
    table.add_column("Subject")
    table.add_column("Packages")
    for subject in iter_subjects():
        table.add_row(subject.value, ", ".join(get_profile(subject).packages))
    get_cli_state().console.print(table)


def prompt(subject: SubjectOption = None) -> None:
    """Print the generation prompt used for a subject."""
    typer.echo(subject_prompt(choose_subject(subject)))


__all__ = ["prompt", "subjects", "title"]
