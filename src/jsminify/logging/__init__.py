"""Logging helpers for jsminify."""
