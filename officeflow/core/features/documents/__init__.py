# (c) Copyright Datacraft, 2026
"""Documents stored in Cosmos DB."""
