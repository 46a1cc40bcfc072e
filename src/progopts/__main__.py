# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m progopts``."""

from __future__ import annotations

from .cli.app import app


def main() -> None:
    app(prog_name="progopts")


if __name__ == "__main__":
    main()
