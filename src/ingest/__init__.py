"""Intake ingestion pipeline.

This package validates intake file names, derives store paths, and
relocates files with copy-verify-delete semantics.
"""
