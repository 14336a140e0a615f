"""Strongly typed identifiers for forum entities.

Identifiers are positive integers assigned by the store on insert,
monotonically increasing and never reused.
"""

from typing import NewType

PostId = NewType("PostId", int)
ThreadId = NewType("ThreadId", int)
