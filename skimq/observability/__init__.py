"""Logging and in-memory telemetry helpers."""
