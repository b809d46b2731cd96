# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Small CLI interaction and output helpers.

Results go to stdout (or a file); progress and errors go to stderr so that the
output can be piped into other tools.

Overwriting files follows a safety-first approach:
- In interactive terminals, the user is asked for confirmation.
- In non-interactive contexts (CI, pipes), an explicit `--force` is required.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

from deposition_analysis.config import ConfigError


OUTPUT_FORMATS = ("json", "yaml")


def is_interactive_tty() -> bool:
    """
    Determine whether we can safely prompt the user.

    Returns:
        True if both stdin and stdout are connected to a TTY.
    """

    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except Exception:  # noqa: BLE001
        return False


def prompt_yes_no(question: str, *, default_no: bool = True) -> bool:
    """
    Ask the user a yes/no question.

    Args:
        question:
            Prompt text without the trailing choice suffix.
        default_no:
            If true, empty input is treated as "no".

    Returns:
        True if the user answered yes.

    Raises:
        RuntimeError:
            If the prompt cannot be shown in a non-interactive session.
    """

    if not is_interactive_tty():
        raise RuntimeError("Cannot prompt in non-interactive mode")

    suffix = "[y/N]" if default_no else "[Y/n]"
    while True:
        answer = input(f"{question} {suffix} ").strip().lower()
        if not answer:
            return not default_no
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False


def prompt_overwrite(path: Path) -> bool:
    """Ask the user whether to overwrite an existing file."""

    return prompt_yes_no(f"Output file already exists: {path}. Overwrite?", default_no=True)


def progress(message: str) -> None:
    """Print a progress message to stderr."""

    print(message, file=sys.stderr)


def render(data: dict[str, Any], fmt: str = "json") -> str:
    """
    Serialize a result dictionary.

    Args:
        data:
            Result produced by a `to_dict()` method.
        fmt:
            `json` or `yaml`.

    Returns:
        Serialized text ending with a newline.
    """

    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def emit(text: str, output: str | None, *, force: bool) -> None:
    """
    Write serialized output to stdout or a file.

    Raises:
        ConfigError:
            If the target file exists and overwriting was not confirmed.
    """

    if not output:
        sys.stdout.write(text)
        return

    dest = Path(output)
    if dest.exists() and not force:
        if not is_interactive_tty():
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")
        if not prompt_overwrite(dest):
            progress("Aborted.")
            return

    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(text, encoding="utf-8")
    progress(f"Wrote result to: {dest}")
