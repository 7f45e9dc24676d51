"""Application layer: request/response DTOs, validators and the default user service."""
