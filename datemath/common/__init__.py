"""Shared infrastructure: logging and telemetry."""
