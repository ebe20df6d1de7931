"""Endpoint de scan de cartão de visita."""
