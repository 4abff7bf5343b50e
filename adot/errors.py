# -*- coding: utf-8 -*-

"""
Error kinds raised by the command handlers.

Handlers raise one of these; ``cli.py`` turns them into a single line on
stderr and exit code 1.
"""


class AdotError(Exception):
    label = "error"

    def describe(self) -> str:
        return f"{self.label}: {self}"


class ConfigError(AdotError):
    label = "configuration error"


class NetworkError(AdotError):
    label = "network error"


class ParseError(AdotError):
    label = "parse error"


class FileIOError(AdotError):
    label = "I/O error"
