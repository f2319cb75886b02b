# (c) Copyright Datacraft, 2026
"""Synchronization of Azure AD users into the local directory cache."""
