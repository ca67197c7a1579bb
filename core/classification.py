"""Structural-path classification into query / request / response contexts.

The conflict resolver only depends on the `PathClassifier` protocol, so the
substring heuristics below can be swapped for a different strategy without
touching the rename/merge control flow.
"""

import re
from typing import Protocol

from models import PathContext

_LEADING_SEGMENT = re.compile(r"^(\w+)\.")


class PathClassifier(Protocol):
    """Protocol for inferring the structural role of an enumeration's path."""

    def classify(self, path: str) -> PathContext | None:
        """
        Classify a structural path.

        Args:
            path: A record's original path, e.g. "PostV1ItemsData.body.format".

        Returns:
            The inferred context, or None when nothing in the path indicates one.
        """


class HeuristicPathClassifier:
    """Default PathClassifier backed by `classify_conflict_context`."""

    def classify(self, path: str) -> PathContext | None:
        return classify_conflict_context(path)


def classify_conflict_context(path: str) -> PathContext | None:
    """
    Infer the context qualifier for a colliding enumeration from its path.

    Checks run from most to least specific:
        1. Explicit section markers: ".query.", ".body.", "ResponseData.".
        2. HTTP verb prefixes on operation data types: "Get...Data." is a query,
           "Post...Data." and "Put...Data." are requests.
        3. Loose substrings anywhere in the path: "query", "body"/"Request",
           "Response".
        4. The lower-cased leading segment: "query"; "request"/"post"/"put";
           "response"/"get".

    Args:
        path: The record's original path.

    Returns:
        The context, or None when no marker is present (e.g. "account.type").
    """
    if ".query." in path:
        return PathContext.QUERY
    if ".body." in path:
        return PathContext.REQUEST
    if "ResponseData." in path:
        return PathContext.RESPONSE

    if path.startswith("Get") and "Data." in path:
        return PathContext.QUERY
    if path.startswith(("Post", "Put")) and "Data." in path:
        return PathContext.REQUEST

    if "query" in path:
        return PathContext.QUERY
    if "body" in path or "Request" in path:
        return PathContext.REQUEST
    if "Response" in path:
        return PathContext.RESPONSE

    leading = _LEADING_SEGMENT.match(path)
    if leading:
        segment = leading.group(1).lower()
        if "query" in segment:
            return PathContext.QUERY
        if any(term in segment for term in ("request", "post", "put")):
            return PathContext.REQUEST
        if any(term in segment for term in ("response", "get")):
            return PathContext.RESPONSE

    return None
