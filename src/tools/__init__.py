"""Toolbar action tools.

This module exposes the checkpoint, restore, and clear tools that a
plotting host attaches to its toolbar and triggers on user action.
"""
