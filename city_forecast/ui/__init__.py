"""Rendering surfaces."""
