"""Entrypoints: composition roots for orchestrators/CLIs."""
