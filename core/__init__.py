"""Core infrastructure for Pipeline Pilot.

This package contains the LLM provider layer shared by the API and the CLI.
It has ZERO dependency on any web framework.
"""

__version__ = "0.3.0"
