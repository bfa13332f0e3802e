"""Application layer: use cases and request/response DTOs."""
