"""Core record model, collection collaborator, and ambient services."""
