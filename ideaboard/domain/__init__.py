"""Domain layer for IdeaBoard.

Pure data (entities and the board snapshot), the error taxonomy, and the
stateless domain services (authorization policy, workflow table). Nothing in
this package performs I/O.
"""
