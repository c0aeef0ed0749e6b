"""Shared infrastructure: configuration, audit logging and labels."""
