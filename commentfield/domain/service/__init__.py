"""Domain services."""

from .base import Service
from .comment_field import CommentField, DiagnosticSink, report_to_logfire

__all__ = [
    "CommentField",
    "DiagnosticSink",
    "Service",
    "report_to_logfire",
]
