"""Base layer: transport-agnostic primitives shared by the client.

Import from the concrete modules (``groqwire.base.errors``,
``groqwire.base.cancellation`` ...) rather than from this package.
"""
