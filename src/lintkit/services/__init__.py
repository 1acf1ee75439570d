"""Service layer — tool orchestration producing SARIF logs.

Services may import from domain, infrastructure, and output.sarif.
They must never import from commands.
"""
