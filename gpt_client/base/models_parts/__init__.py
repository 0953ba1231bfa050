"""Model parts package.

Prefer importing from ``gpt_client.base.models`` for the stable surface.
"""
