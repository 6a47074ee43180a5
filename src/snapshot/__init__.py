"""Snapshot layer.

This module copies data source columns into independent snapshots
and keeps one last-in-first-out stack of them per source.
"""
