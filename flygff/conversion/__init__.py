"""
FlyBase-specific record conversion.
"""
