"""Core interfaces.

Structural contracts (Protocol) implemented by adapters, so the core depends
on abstractions rather than on `sys.stdin`.
"""
