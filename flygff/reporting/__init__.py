"""
Output of converted items.
"""
