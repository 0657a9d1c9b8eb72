"""Pytest configuration for the resxtext test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from resxtext.localization import MemoryResourceSource

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

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
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def greeting_files() -> dict[str, str]:
    """Invariant, 'de' and 'en' files for Shared.Resources.Greeting."""
    return {
        "Resources.Greeting.txt": "; default strings\nHello=Hi\nBye=Goodbye\n",
        "Resources.Greeting_de.txt": "Hello=Hallo\nBye=Tschüss\n",
        "Resources.Greeting_en.txt": "Hello=Hello\n",
        "Resources.Greeting.resx": "<root />",
        "Resources.Other.txt": "Hello=Other\n",
    }


@pytest.fixture
def greeting_source(greeting_files: dict[str, str]) -> MemoryResourceSource:
    """In-memory source holding greeting_files."""
    return MemoryResourceSource(greeting_files)
