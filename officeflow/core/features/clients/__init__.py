# (c) Copyright Datacraft, 2026
"""Clients (external customers of the organization)."""
