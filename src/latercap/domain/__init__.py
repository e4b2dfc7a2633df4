"""Domain layer: content types, keyword tables, and the classifier.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config,
and it never logs or performs I/O.
"""
