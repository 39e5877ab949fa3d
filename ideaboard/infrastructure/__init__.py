"""Infrastructure adapters for IdeaBoard."""
