"""
Private implementation modules, the public API is re-exported by the package.
"""
