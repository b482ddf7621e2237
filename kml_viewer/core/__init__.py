"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants, analysis views
- exceptions: Custom exception hierarchy
- ingress: HTTP request decoding and error mapping
"""
