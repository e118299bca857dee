"""
flygff - FlyBase GFF3 to target-model item conversion.
"""

__version__ = "0.1.0"
