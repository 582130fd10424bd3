"""Logging and evaluator settings."""
