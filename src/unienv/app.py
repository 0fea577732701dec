"""Command line entry point for unienv."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from fnmatch import fnmatchcase
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from rich.console import Console
from rich.table import Table
from rich.text import Text

from unienv import settings as settings_module
from unienv.adapters.hosts import detect_host
from unienv.core.context import EnvContext
from unienv.core.loader import read_config_table
from unienv.core.locator import find_config_file
from unienv.core.store import EnvStore

NAME = "UNIENV"
FONT = "tarty-1"
MASK = "***"
DEFAULT_LOG_PATH = "logs/unienv.log"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    """Masks known secret values in every formatted record."""

    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        # Longest first so a secret containing another is masked whole.
        self._secrets = sorted({secret for secret in secrets if secret}, key=len, reverse=True)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, MASK)
        return message


def _redacted_names(patterns: list[str], store: EnvStore) -> list[str]:
    """Expand glob patterns against the keys of the nearest config file."""

    context = store.context
    host = context.host
    names = [pattern for pattern in patterns if not any(ch in pattern for ch in "*?[")]
    env_path = find_config_file(host, host.cwd(), context.env_file)
    if env_path is not None:
        table = read_config_table(context, env_path) or {}
        for key in table:
            if any(fnmatchcase(key, pattern) for pattern in patterns) and key not in names:
                names.append(key)
    return names


def _collect_redaction_values(config: dict, store: EnvStore) -> list[str]:
    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", False):
        return []
    values = []
    for name in _redacted_names(list(redact_cfg.get("patterns", [])), store):
        # Reading through the store seeds the environment from the config file.
        result = store.get(name)
        if result.is_ok() and result.value:
            values.append(result.value)
    return sorted(set(values), key=len, reverse=True)


def _log_file_handler(file_cfg: dict, base_dir: str) -> RotatingFileHandler:
    path = file_cfg.get("path", DEFAULT_LOG_PATH)
    if not os.path.isabs(path):
        path = os.path.join(base_dir, path)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
        backupCount=int(file_cfg.get("backup_count", 5)),
        encoding="utf-8",
    )


def _configure_logging(config: dict, store: EnvStore, base_dir: str) -> None:
    """Attach handlers from the ``logging`` settings section.

    Relative log file paths resolve against ``base_dir``, the directory of
    the settings file.
    """

    if not config.get("enabled", False):
        return

    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    formatter = _RedactingFormatter(
        _collect_redaction_values(config, store),
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []
    if config.get("console", True):
        handlers.append(logging.StreamHandler())
    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        handlers.append(_log_file_handler(file_cfg, base_dir))
    if not handlers:
        return

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers)


def _get(store: EnvStore, key: str, error_console: Console) -> int:
    result = store.get(key)
    if result.is_ng():
        error_console.print(f"[red]{result.error}[/red]", highlight=False)
        return 2
    if result.value is None:
        return 1
    print(result.value)
    return 0


def _info(store: EnvStore, console: Console) -> int:
    _print_banner()
    context = store.context
    host = context.host
    versions = context.versions()
    guarded = store.gate.guard()
    env_path = find_config_file(host, host.cwd(), context.env_file)

    table = Table(show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("Host", host.kind.display_name)
    table.add_row("Platform", host.platform())
    table.add_row("Required version", versions.required)
    table.add_row("Current version", versions.current)
    table.add_row("Supported", "yes" if guarded.is_ok() else "no")
    table.add_row("Read permission", "granted" if store.gate.may_read_files() else "denied")
    table.add_row("Config file", Text(env_path or "not found"))
    console.print(table)
    return 0 if guarded.is_ok() else 2


def _parse(store: EnvStore, path: Optional[str], reveal: bool, console: Console) -> int:
    context = store.context
    host = context.host
    if path is None:
        path = find_config_file(host, host.cwd(), context.env_file)
        if path is None:
            console.print(f"No {context.env_file} found", highlight=False)
            return 1

    resolved = read_config_table(context, path)
    if resolved is None:
        console.print(f"[red]Cannot read {path}[/red]", highlight=False)
        return 2

    table = Table(title=Text(path))
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in resolved.items():
        table.add_row(Text(key), Text(value) if reveal else MASK)
    console.print(table)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="unienv")
    parser.add_argument("--config", help="Path to a unienv.json settings file")
    subparsers = parser.add_subparsers(dest="command")

    get_parser = subparsers.add_parser("get", help="Print the value of a variable")
    get_parser.add_argument("key")
    subparsers.add_parser("info", help="Show host, version gate and config file status")
    parse_parser = subparsers.add_parser("parse", help="Show the resolved contents of a .env file")
    parse_parser.add_argument("path", nargs="?")
    parse_parser.add_argument("--reveal", action="store_true", help="Print values unmasked")

    args = parser.parse_args(argv)
    settings = settings_module.load_settings(args.config)
    store = EnvStore(EnvContext(detect_host(), settings_module.env_file_name(settings)))
    _configure_logging(
        settings_module.logging_settings(settings),
        store,
        settings_module.settings_dir(args.config),
    )
    console = Console()

    if args.command == "get":
        return _get(store, args.key, Console(stderr=True))
    if args.command == "parse":
        return _parse(store, args.path, args.reveal, console)
    return _info(store, console)


if __name__ == "__main__":
    sys.exit(main())
