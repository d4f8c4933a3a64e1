"""Internal modules for Egnyte SDK.

WARNING: These modules are shared plumbing for the resource clients.
They are not intended for direct use in application code.

Modules:
    http - Client configuration and the request executor
    mapping - Response decoding and error translation
    validation - Argument guards
    redaction - Credential redaction for debug traces
"""
