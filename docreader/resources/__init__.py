"""
Text assets embedded in the package, addressed by name.
"""
