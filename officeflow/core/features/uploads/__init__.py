# (c) Copyright Datacraft, 2026
"""Authenticated file uploads."""
