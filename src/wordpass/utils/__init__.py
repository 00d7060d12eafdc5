"""Shared helpers: errors, logging and validation predicates."""
