"""Multiples package: parser, calculator, file pipeline, and CLI."""

__all__ = [
    "config",
    "parser",
    "calculator",
    "pipeline",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "multiples",
    "compute_line",
    "compute_lines",
    "validate_line",
    "process_file",
]
