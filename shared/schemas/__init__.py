"""Pydantic v2 schemas shared between the API, the CLI, and the plan engine."""

from .brief import *  # noqa: F401,F403
from .plan import *  # noqa: F401,F403
