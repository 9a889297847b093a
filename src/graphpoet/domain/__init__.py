"""Domain layer — graph ADT, tokenizer, and poem generation.

This layer depends only on stdlib and networkx.
It must never import from services, infrastructure, commands, or config.
"""
