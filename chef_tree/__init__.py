"""
Dependency tree for chef cookbooks
==================================

Walks include_recipe references from a starting cookbook and prints
the cookbooks they resolve to, with the version constraints declared
in each metadata.rb.
"""
__version__ = "0.1.0"
