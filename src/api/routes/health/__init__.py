"""Endpoints de health check."""
