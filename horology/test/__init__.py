"""
# Test harness used by the projects of the package.
"""
