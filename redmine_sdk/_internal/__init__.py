"""Internal modules for Redmine SDK.

These are not intended for direct use in application code.

Modules:
    http - Shared HTTP client configuration
    redaction - Credential masking for log output
    responses - Status checks and body decoding
"""
