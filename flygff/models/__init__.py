"""
Data models for items and GFF3 records.
"""
