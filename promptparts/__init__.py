"""Building blocks for shell prompts: tool versions, repository state, time and system details."""

__version__ = "0.1.0"