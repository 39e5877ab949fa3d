"""
IdeaBoard - Collaborative Idea Management Engine

Participants submit proposals, vote and comment on them; managers move
proposals through a review workflow and convert approved ones into
tracked projects.

Engine Guarantees:
- Every state change goes through the mutation service
- Vote counts are derived from voter sets and never drift
- Persistence happens strictly after a new snapshot exists
- Malformed stored data never crashes startup
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
