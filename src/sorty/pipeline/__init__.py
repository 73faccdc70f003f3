"""Duplicate-detection pipeline.

The stages run in this order:
- traverse: collect non-empty and empty regular files under a root
- size_bucket: partition candidate files by exact byte length
- content_group: digest files within each size bucket and group equal digests
"""
from .traverse import Collection, collect_files
from .size_bucket import group_by_size
from .content_group import DuplicateGroup, group_by_content
