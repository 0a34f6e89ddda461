"""Core layer — validation chain, container, builder, and handler base.

Core may import from domain and errors. It must never import from
commands, output, or config at module level.
"""
