"""Pytest configuration for the jsonlocalizer test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# RESOURCE FIXTURES
# =============================================================================


@pytest.fixture
def resources_dir(tmp_path: Path) -> Path:
    """Empty ``Resources`` directory under a temporary content root."""
    directory = tmp_path / "Resources"
    directory.mkdir()
    return directory


@pytest.fixture
def write_resource(resources_dir: Path) -> Callable[[str, Any], Path]:
    """Write ``<culture>.json`` into ``resources_dir``.

    Dicts and lists are serialized as JSON; str and bytes are written
    verbatim so tests can create malformed files.
    """

    def _write(culture: str, content: Any) -> Path:
        path = resources_dir / f"{culture}.json"
        match content:
            case bytes():
                path.write_bytes(content)
            case str():
                path.write_text(content, encoding="utf-8")
            case _:
                path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
