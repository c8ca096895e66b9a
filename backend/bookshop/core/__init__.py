"""
Core application modules.
Contains essential infrastructure components:
- container: store and service wiring
- db: Database configuration and connection management
- errors: domain error taxonomy
- security: password hashing and bearer tokens
"""
