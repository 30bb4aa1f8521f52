"""
Service layer for business logic.

This package contains the service that validates uploaded statement
files and runs them through the ingestion pipeline.
"""
