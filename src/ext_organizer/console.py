# console.py - every line the user sees goes through Console
from __future__ import annotations
import sys
from pathlib import Path
from typing import Sequence, TextIO

import click


class Console:
    def __init__(self, color: bool = True, out: TextIO | None = None, err: TextIO | None = None):
        self.color = color
        self._out = out
        self._err = err

    # streams are looked up lazily so pytest's capsys sees the output
    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def style(self, text: str, **styles) -> str:
        if not self.color:
            return text
        return click.style(text, **styles)

    def echo(self, message: str = "", *, err: bool = False, nl: bool = True) -> None:
        click.echo(message, file=self.err if err else self.out, nl=nl, color=None if self.color else False)

    # -------------------- messages --------------------
    def no_matches(self, extension: str, directory: Path) -> None:
        self.echo(f"{self.style('info:', fg='blue')} No files ending with "
                  f"{self.style(extension, fg='yellow')} found in {directory}")

    def found(self, count: int, extension: str, directory: Path, names: Sequence[str]) -> None:
        self.echo()
        self.echo(f"{self.style('FOUND:', fg='bright_green', bold=True)} "
                  f"{self.style(str(count), fg='yellow')} file(s) ending with "
                  f"{self.style(extension, fg='cyan')} in {self.style(str(directory), fg='blue')}")
        for name in names:
            self.echo(f"  - {name}")

    def prompt(self, question: str) -> None:
        self.echo(f"{self.style(question, bold=True)} [y/N]: ", nl=False)
        self.out.flush()

    def cancelled(self) -> None:
        self.echo(self.style("Operation cancelled by the user.", fg="yellow"))

    def created(self, folder: Path) -> None:
        self.echo(f"{self.style('OK:', fg='green')} Created folder {folder}")

    def moved(self, name: str) -> None:
        self.echo(f"  {self.style('✔', fg='green')} {name}")

    def failed(self, name: str, reason: str) -> None:
        self.echo(f"  {self.style('✘', fg='red')} {name}: {reason}", err=True)

    def summary(self, moved: int, failed: int, folder_name: str) -> None:
        label = self.style("DONE:", fg="white", bg="green", bold=True) if not failed \
            else self.style("DONE:", fg="white", bg="red", bold=True)
        line = (f"{label} Moved {self.style(str(moved), fg='yellow', bold=True)} file(s) "
                f"to folder {self.style(folder_name, fg='cyan')}.")
        if failed:
            line += f" {self.style(str(failed), fg='red', bold=True)} failed."
        self.echo()
        self.echo(line)

    def error(self, message: str) -> None:
        self.echo(f"{self.style('Error:', fg='bright_red', bold=True)} {message}", err=True)

    def notification(self, title: str, body: str) -> None:
        self.echo()
        self.echo(f"{self.style('NOTIFICATION:', fg='bright_yellow', bold=True)} {title}: {body}")
