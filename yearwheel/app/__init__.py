"""Application composition layer for the command-line entry point.

Wires adapters, use cases, and view models into a runnable layout command
without placing layout logic here.
"""
