"""Application layer: use-case services, access policy and read models."""
