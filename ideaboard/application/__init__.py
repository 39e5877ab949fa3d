"""Application layer for IdeaBoard: ports, DTOs and services."""
