"""Shared fixtures: Atom documents as the Hatena Blog AtomPub API returns them."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

BLOG_ROOT = "https://blog.hatena.ne.jp/alice/alice.hatenablog.com/atom"
COLLECTION_URI = f"{BLOG_ROOT}/entry"
CATEGORY_URI = f"{BLOG_ROOT}/category"


def build_entry_xml(
    entry_id: str = "2500000000",
    *,
    title: str = "Hello",
    updated: str = "2020-01-01T09:00:00+09:00",
    published: str = "2020-01-01T09:00:00+09:00",
    edited: str = "2020-01-02T10:00:00+09:00",
    categories: Sequence[str] = ("diary",),
    summary: str = "First post summary",
    content_type: str = "text/x-markdown",
    content: str = "# First post",
    formatted: str = "&lt;h1&gt;First post&lt;/h1&gt;",
    draft: str = "no",
    edit_link: str | None = None,
    root: bool = True,
) -> str:
    """Build an ``entry`` element; ``root=True`` adds the namespace declarations."""
    if edit_link is None:
        edit_link = f"{COLLECTION_URI}/{entry_id}"
    ns = (
        ' xmlns="http://www.w3.org/2005/Atom"'
        ' xmlns:app="http://www.w3.org/2007/app"'
        ' xmlns:hatena="http://www.hatena.ne.jp/info/xmlns#"'
        if root
        else ""
    )
    category_xml = "".join(f'<category term="{c}"/>' for c in categories)
    return (
        f"<entry{ns}>"
        f"<id>tag:blog.hatena.ne.jp,2013:blog-alice-12345-{entry_id}</id>"
        f'<link rel="edit" href="{edit_link}"/>'
        f'<link rel="alternate" type="text/html" href="https://alice.hatenablog.com/entry/{entry_id}"/>'
        f"<author><name>alice</name></author>"
        f"<title>{title}</title>"
        f"<updated>{updated}</updated>"
        f"<published>{published}</published>"
        f"<app:edited>{edited}</app:edited>"
        f"<summary type=\"text\">{summary}</summary>"
        f'<content type="{content_type}">{content}</content>'
        f'<hatena:formatted-content type="text/html">{formatted}</hatena:formatted-content>'
        f"{category_xml}"
        f"<app:control><app:draft>{draft}</app:draft></app:control>"
        f"</entry>"
    )


def build_feed_xml(entries: Sequence[str] = (), next_uri: str | None = None) -> str:
    """Build a collection page from ``entry`` elements built with ``root=False``."""
    next_link = f'<link rel="next" href="{next_uri}"/>' if next_uri else ""
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<feed xmlns="http://www.w3.org/2005/Atom"'
        ' xmlns:app="http://www.w3.org/2007/app"'
        ' xmlns:hatena="http://www.hatena.ne.jp/info/xmlns#">'
        f'<link rel="first" href="{COLLECTION_URI}"/>'
        f"{next_link}"
        "<title>alice's blog</title>"
        f"{''.join(entries)}"
        "</feed>"
    )


def build_categories_xml(terms: Sequence[str]) -> str:
    categories = "".join(f'<atom:category term="{t}"/>' for t in terms)
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<app:categories xmlns:app="http://www.w3.org/2007/app"'
        ' xmlns:atom="http://www.w3.org/2005/Atom" fixed="no">'
        f"{categories}"
        "</app:categories>"
    )


@pytest.fixture
def entry_xml() -> Callable[..., str]:
    """Factory for entry documents."""
    return build_entry_xml


@pytest.fixture
def feed_xml() -> Callable[..., str]:
    """Factory for feed documents."""
    return build_feed_xml


@pytest.fixture
def categories_xml() -> Callable[..., str]:
    """Factory for category documents."""
    return build_categories_xml
