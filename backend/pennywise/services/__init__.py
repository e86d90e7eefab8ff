"""
Budget services package.
"""
