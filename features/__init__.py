"""
Features package — each sub-package encapsulates a self-contained feature.

Convention:
  features/<feature_name>/
    __init__.py      — public API re-exports
    models.py        — data models specific to this feature
    aggregator.py    — runtime state management (if applicable)
    ...              — any other feature-specific modules
"""
