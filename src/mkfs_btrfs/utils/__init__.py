"""Shared utilities — constants used across layers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
