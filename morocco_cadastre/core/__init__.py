"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants, bounds, SRIDs, region prefix table
- exceptions: Custom exception hierarchy
"""
