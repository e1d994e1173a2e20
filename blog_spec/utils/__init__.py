"""Utility modules for blog-spec.

- frontmatter.py: YAML front matter extraction
"""
