"""
MiniDB: In-Memory Key-Value Store

A tiny key-value store driven by a two-command text language (STORE and
GET), usable from an interactive shell or as a one-shot command.
"""

__version__ = "1.0.0"
