"""
Only the root tests directory has an __init__.py; subdirectories rely on PEP 420 namespace
packages, so test module names must stay unique across the tree.
"""
