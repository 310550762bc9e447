"""Pytest configuration for the localekit test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Shared locale state:
The process-wide LocaleState is reset around every test so tests that use
the module-level helpers (set_locale, subscribe, ...) cannot leak listeners
or locale values into each other.
"""

from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from localekit.runtime.state import LocaleState, reset_shared_state

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

# CI profile: fast feedback for GitHub Actions (50 examples)
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


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


# Load appropriate profile automatically
settings.load_profile(_detect_profile())


# =============================================================================
# SHARED STATE ISOLATION
# =============================================================================


@pytest.fixture(autouse=True)
def shared_state() -> Iterator[LocaleState]:
    """Install a fresh shared LocaleState (zh / zh) for each test."""
    state = LocaleState()
    reset_shared_state(state)
    yield state
    reset_shared_state(None)


@pytest.fixture
def greeting_table() -> dict[str, dict[str, str]]:
    """Two-locale table used by the end-to-end scenarios."""
    return {
        "en": {"greet": "Hi {name}"},
        "zh-CN": {"greet": "你好{name}"},
    }
