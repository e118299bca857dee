"""
GFF3 input readers.
"""
