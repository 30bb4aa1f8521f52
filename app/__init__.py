"""
HTTP surface for statement ingestion.
"""
