"""Domain layer — documents, frontmatter grammar, links, and tag rules.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
