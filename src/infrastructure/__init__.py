"""Infrastructure Layer.

Adapters that turn external data (raw buffers, transport payloads) into
domain Value Objects.
"""
