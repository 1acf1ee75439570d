"""Infrastructure layer — filesystem discovery and reading.

This layer performs all I/O. It may import domain types to build them, but
must never import from services, commands, or output.
"""
