"""LPSN bacteria lookup service."""
