"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants for the codec, clipper and longitude frames
- exceptions: Custom exception hierarchy
"""
