"""Shared helpers: telemetry (logging, tracing) and small utilities."""
