"""Shared testing utilities for blog-spec.

- site_builder.py: builders for posts and throwaway Jekyll-style sites
"""
