"""Internal modules for SafeCharge SDK.

WARNING: These modules are used by the request executor.
They are not intended for direct use in application code.

Modules:
    http - Shared HTTP client configuration
    transport - Transport protocol and httpx implementation
    lifecycle - One-time transport installation
    redaction - Redaction of logged bodies
"""
