"""Document store layer.

This package owns store bootstrap and reset utilities and the SDK client
that binds configuration to the ingest pipeline.
"""
