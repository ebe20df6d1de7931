"""Endpoints do perfil de contato."""
