"""Snapshot ingestion.

Reads entity collections exported by the surrounding application and
validates them record by record into an immutable `Snapshot`.
"""
