"""Shared infrastructure: paths, exceptions, logging and CLI helpers."""
