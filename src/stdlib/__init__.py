"""
nativekit helper library
"""
