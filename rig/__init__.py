"""Rig - generate new projects from placeholder templates."""

__version__ = "0.2.0"
