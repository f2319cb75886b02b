# (c) Copyright Datacraft, 2026
"""Organizations: the tenant every relational row belongs to."""
