from __future__ import annotations

from .defaults import from_legacy_config
from .schema import Settings


def load_settings(
    *,
    policy: str | None = None,
    sims: int | None = None,
    seed: int | None = None,
) -> Settings:
    """Load runtime settings, defaulting to values from the legacy config module."""
    settings = from_legacy_config()
    if policy is not None:
        settings = settings.with_overrides(policy=policy)
    if sims is not None:
        settings = settings.with_overrides(sims_per_policy=sims)
    if seed is not None:
        settings = settings.with_overrides(seed=seed)
    settings.paths.ensure_dirs()
    return settings
