"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Feed URLs, time zone and precision defaults
- exceptions: Custom exception hierarchy
- ingress: Upstream feed fetch and JSON decoding
"""
