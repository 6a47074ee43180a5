"""Core shared layer.

This module holds errors, constants, config, logging, and typed models
used by the source, snapshot, and tool layers.
"""
