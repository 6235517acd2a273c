"""Pytest configuration for localeswitch test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from localeswitch.localization import (
    LocaleRegistry,
    LocalizationConfig,
    LocalizationManager,
    MemoryResourceProvider,
    SwitchCoordinator,
)

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Function-scoped fixtures are only read, never mutated, inside @given tests
_SUPPRESSED = [HealthCheck.function_scoped_fixture]

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SUPPRESSED,
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
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

PREFIX = "Localization"


@pytest.fixture
def provider() -> MemoryResourceProvider:
    """Provider holding 'ja' and 'de' localizations plus a non-locale folder."""
    return MemoryResourceProvider(
        {
            "bg.png": b"source-bg",
            f"{PREFIX}/ja/bg.png": b"ja-bg",
            f"{PREFIX}/ja/Text/intro.txt": "こんにちは",
            f"{PREFIX}/de/Text/intro.txt": "Hallo",
            f"{PREFIX}/Shared/font.ttf": b"font",
        }
    )


@pytest.fixture
async def registry(provider: MemoryResourceProvider) -> LocaleRegistry:
    """Refreshed registry: available = ('ja', 'de', 'en')."""
    registry = LocaleRegistry(provider, PREFIX, "en")
    await registry.refresh()
    return registry


@pytest.fixture
def coordinator(registry: LocaleRegistry) -> SwitchCoordinator:
    """Coordinator with nothing selected yet."""
    return SwitchCoordinator(registry)


@pytest.fixture
def manager(provider: MemoryResourceProvider) -> LocalizationManager:
    """Uninitialized manager over the shared provider."""
    return LocalizationManager(provider, LocalizationConfig(source_locale="en"))
