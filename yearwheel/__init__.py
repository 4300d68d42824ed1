"""Radial year-wheel layout engine.

The ``domain`` package holds the pure geometry (date-to-angle projection,
ring band allocation, ticks, focus rotation, view boxes). ``usecases`` expose
the frame-level entry points, ``viewmodels`` keep UI state, and ``adapters``
talk to the outside world (holiday feed, local settings storage).
"""

__version__ = "0.1.0"
