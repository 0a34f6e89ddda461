"""Domain layer — the Result monad and typed keys.

This layer depends only on the stdlib and :mod:`hexafun.errors`.
It must never import from core, testing, config, plugins, or commands.
"""
