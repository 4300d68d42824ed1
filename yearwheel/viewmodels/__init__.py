"""ViewModel package for wheel state and preference surfaces.

Call context:
    ``yearwheel/app/main.py`` and any presentation layer import concrete
    viewmodels from this package and bind their callbacks to drawing code.

Dependencies:
    Modules in this package depend on domain types and the pure layout use
    cases only. Holiday and storage adapters remain outside.

Responsibilities:
    - Hold mutable wheel inputs (snapshot, today, highlight, viewport).
    - Recompute layout, rotation, and view box when their inputs change.
    - Validate and coerce persisted user preferences.
"""
