"""Shared helpers used across the schema definition builders."""
