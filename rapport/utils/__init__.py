"""Shared utilities: exceptions, logging configuration and constants."""
