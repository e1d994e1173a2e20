"""YAML front matter extraction for blog posts.

Front matter format:
---
layout: post
title: "Hello"
date: 2015-01-01
comments: true
---

Post body here...

The first line that is exactly ``---`` opens the block and the first later
line that is exactly ``---`` closes it. Anything that prevents a mapping from
being produced (no delimiter pair, invalid YAML, a scalar or list block)
yields an empty dict rather than an exception.
"""

import logging
import re
from typing import Any

import yaml  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
BYTE_ORDER_MARK = "\ufeff"

# Non-greedy so the first closing delimiter wins
FRONTMATTER_PATTERN = re.compile(
    r"^---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?",
    re.DOTALL | re.MULTILINE,
)


def split_front_matter(content: str) -> tuple[str | None, str]:
    """Split content into the raw front matter block and the body.

    Returns:
        Tuple of (raw YAML text or None when no delimiter pair exists, body)
    """
    if not content:
        return None, content or ""

    content = content.removeprefix(BYTE_ORDER_MARK)

    match = FRONTMATTER_PATTERN.search(content)
    if not match:
        return None, content

    return match.group(1), content[match.end() :]


def extract_front_matter(content: str) -> dict[str, Any]:
    """Deserialize the front matter of ``content`` into a mapping.

    Args:
        content: Full file content that may contain front matter

    Returns:
        The front matter mapping, or an empty dict when the block is absent,
        is not valid YAML, or does not hold a mapping
    """
    yaml_block, _ = split_front_matter(content)
    if yaml_block is None:
        logger.debug("No front matter delimiter pair found")
        return {}

    try:
        metadata = yaml.safe_load(yaml_block)
    except (yaml.YAMLError, ValueError) as e:
        # Out-of-range timestamps such as 2015-02-30 raise ValueError
        logger.debug("Front matter is not valid YAML: %s", e)
        return {}

    if not isinstance(metadata, dict):
        if metadata is not None:
            logger.debug("Front matter is a %s, not a mapping", type(metadata).__name__)
        return {}

    return metadata

