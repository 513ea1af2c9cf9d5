"""Filter, limit and render articles as tool result text."""

from typing import Iterable, List, Optional

from .messages import EN, Messages
from .models import ArticleRecord


def filter_by_keyword(records: Iterable[ArticleRecord], keyword: str) -> List[ArticleRecord]:
    """Keep records whose title or summary contains the keyword (case-sensitive)."""
    return [r for r in records if keyword in r.title or keyword in (r.summary or "")]


def format_article(index: int, record: ArticleRecord, messages: Messages = EN) -> str:
    lines = [
        f"{index}. {record.title}",
        f"   {messages.date_label}: {record.published_at}",
    ]
    if record.source:
        lines.append(f"   {messages.source_label}: {record.source}")
    lines.append(f"   {messages.link_label}: {record.link}")
    lines.append(f"   {record.summary or ''}")
    return "\n".join(lines) + "\n"


def format_articles(records: Iterable[ArticleRecord], messages: Messages = EN) -> str:
    """Render records as numbered blocks separated by a blank line."""
    return "\n".join(format_article(i, r, messages) for i, r in enumerate(records, start=1))


def process(
    records: Iterable[ArticleRecord],
    limit: int,
    header: str,
    keyword: Optional[str] = None,
    messages: Messages = EN,
) -> str:
    """Run the keyword filter, take the first ``limit`` records and format them.

    Args:
        records: Articles in source order
        limit: Maximum number of articles to render
        header: First line of the output
        keyword: Optional literal substring to filter on
        messages: Catalogue for labels and the no-results text

    Returns:
        The formatted text, or a no-results sentence when nothing is left
    """
    records = list(records)
    if keyword is not None:
        records = filter_by_keyword(records, keyword)
        if not records:
            return messages.no_keyword_results.format(keyword=keyword)
    elif not records:
        return messages.no_articles

    selected = records[:limit]
    return f"{header}\n\n{format_articles(selected, messages)}"
