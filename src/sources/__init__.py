"""Host-side data source layer.

This module models the column data sources that back rendered plots.
It exposes change signals the rendering host subscribes to.
"""
