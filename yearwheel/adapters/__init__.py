"""Adapter package for external I/O implementations.

Purpose:
    Concrete implementations of the domain ports: the public-holiday feed
    over HTTP and local JSON storage for user settings.

Dependencies:
    ``requests`` for network I/O, filesystem APIs, and the protocol
    definitions in ``yearwheel.domain.ports``.
"""
