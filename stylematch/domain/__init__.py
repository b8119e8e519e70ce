"""Domain layer: catalog entities and collaborator interfaces."""
