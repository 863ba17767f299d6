# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the unix_clock runner.

Usage:
    python -m unix_clock.runner < input.json > output.json

The runner reads JSON input from stdin, replays the commands on a clock
engine, and writes the rendered view as JSON to stdout.

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import sys

from .executor import Executor
from .schema import RunnerInput, RunnerOutput


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        input_json = sys.stdin.read()
        input_data = RunnerInput.model_validate_json(input_json or "{}")

        output = Executor().execute(input_data)
        print(output.model_dump_json())

        return 0 if output.success else 1

    except Exception as e:
        # Always emit valid JSON, even for malformed input
        error_output = RunnerOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )
        print(error_output.model_dump_json())
        return 1


if __name__ == "__main__":
    sys.exit(main())
