"""Introspect — tool-call history and usage statistics for autonomous agents.

Records every tool invocation an agent makes to an append-only log and
answers two questions about it: which calls happened (paginated, filterable)
and how they went in aggregate.
"""

__version__ = "0.1.0"
