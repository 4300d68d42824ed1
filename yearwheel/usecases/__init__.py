"""Use-case layer for the wheel.

Each module coordinates domain objects and ports. Layout, focus, and view-box
use cases are pure; only the holiday and settings use cases touch ports.
"""
