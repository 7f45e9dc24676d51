"""Domain layer: user entity, repository and service contracts."""
