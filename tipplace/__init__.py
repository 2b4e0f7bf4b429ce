"""Tooltip placement and visibility coordination."""
