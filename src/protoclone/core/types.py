"""Core type definitions for protoclone."""

type Clone[T] = T
"""Type alias indicating a value delegates to its source.

When you see `Clone[T]` in a return type, reads fall through to the source
object for anything the clone has not set itself. Writes and deletes never
reach the source.
"""

type Copy[T] = T
"""Type alias indicating a value is an independent shallow copy.

When you see `Copy[T]` in a return type, the top-level properties belong to
the result alone. Nested objects are still shared with the source.
"""
