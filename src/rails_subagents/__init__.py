"""Rails subagents: scaffold Claude Code subagent definitions for Rails projects."""

__version__ = "0.3.0"
