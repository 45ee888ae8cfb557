"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No conversion logic.
"""
