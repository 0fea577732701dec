"""Core domain package for unienv.

Core contains parsing, interpolation, version gating and load orchestration
without touching any interpreter-specific API directly. Everything that
reaches the real process goes through the host port.
"""
