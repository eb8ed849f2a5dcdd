"""Shared utilities: exceptions, logging, configuration and argument validation."""
