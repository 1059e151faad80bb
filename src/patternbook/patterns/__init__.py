"""
Pattern examples.

Every module below this package illustrates exactly one pattern and does
not import any other pattern module.
"""
