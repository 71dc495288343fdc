"""Subtitle muxing bounded context (DDD layered package).

This package is split into:
- domain: value objects, language catalog and pure domain services
- application: the job dispatcher and the add-subtitles use case
- infrastructure: IO adapters (filesystem, subprocess, console)
- entrypoints: composition root used by the CLI
"""
