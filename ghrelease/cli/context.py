from __future__ import annotations

from dataclasses import dataclass

from ghrelease.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    console: ConsoleProtocol


def build_context() -> CLIContext:
    return CLIContext(console=RichConsole())
