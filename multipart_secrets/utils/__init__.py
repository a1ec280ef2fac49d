"""Shared utilities."""

from .tags import create_tags, merge_tags, to_aws_tags

__all__ = ["create_tags", "merge_tags", "to_aws_tags"]
