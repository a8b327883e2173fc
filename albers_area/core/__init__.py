"""Core utilities and shared infrastructure.

- config: Projection parameters and environment overrides
- constants: Named projection constants and unit conversions
- exceptions: Custom exception hierarchy
"""
