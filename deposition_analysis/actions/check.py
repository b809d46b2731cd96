# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration status action.

Reports whether an API key is configured and which settings are in effect.
Never contacts the model and never fails on a missing key.
"""

import argparse
import json
from dataclasses import dataclass

from deposition_analysis.config import ConfigError, Settings, has_api_key, load_llm_config


@dataclass(frozen=True)
class CheckAction:
    """`check` subcommand."""

    name: str = "check"
    help: str = "Show configuration status"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        _ = parser

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        _ = args
        settings = settings or Settings()

        status: dict[str, object] = {
            "status": "ok",
            "hasApiKey": has_api_key(),
            "configFile": str(settings.config_path) if settings.config_path else None,
        }

        try:
            status["model"] = load_llm_config(settings).model
        except ConfigError as exc:
            status["status"] = "incomplete"
            status["error"] = str(exc)

        print(json.dumps(status, indent=2))
