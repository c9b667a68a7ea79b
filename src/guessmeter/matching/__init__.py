"""Pattern matchers and the orchestrator that runs them all."""
from __future__ import annotations

from guessmeter.matching.core import analyse_token, find_matches

__all__ = ["analyse_token", "find_matches"]
