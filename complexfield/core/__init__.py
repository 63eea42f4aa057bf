"""
Core value types, arithmetic and contracts.

Pure computational layer: no I/O, no shared state, no configuration.
"""
