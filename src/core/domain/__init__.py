"""Domain models and entities.

Pure, strict data structures (Pydantic v2): temperatures, units and run
outcomes. The domain knows nothing about the CLI or the input stream.
"""
