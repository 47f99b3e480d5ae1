"""Domain layer - the error container and its contracts.

Structure:
- protocols/: Ports (logging sink, cause chain, response mapping)
- metadata.py: Diagnostic metadata and call-site capture
- dispatch.py: Diagnostic record building and emission
- detailed_error.py: The DetailedError container
- public_error.py: Reference public errors

Concrete logging and cause chain backends live in the infrastructure layer
and are injected through ``api_error.core.container``.
"""
