"""User-visible strings for tool results, in English and Japanese."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Messages:
    category_header: str
    keyword_header: str
    headlines_header: str
    date_label: str
    source_label: str
    link_label: str
    no_keyword_results: str
    no_articles: str
    unknown_tool: str
    error_prefix: str
    fetch_failed: str
    search_failed: str
    headlines_failed: str
    quota_exceeded: str
    missing_required: str
    out_of_range: str
    invalid_enum: str
    invalid_type: str


EN = Messages(
    category_header="Latest news in category {category}:",
    keyword_header='News related to "{keyword}":',
    headlines_header="Top headlines in category {category}:",
    date_label="Published",
    source_label="Source",
    link_label="Link",
    no_keyword_results='No news found related to "{keyword}".',
    no_articles="No articles found.",
    unknown_tool="Unknown tool: {name}",
    error_prefix="Error: {message}",
    fetch_failed="Error occurred while fetching news: {reason}",
    search_failed="Error occurred while searching for news: {reason}",
    headlines_failed="Error occurred while fetching top headlines: {reason}",
    quota_exceeded="API daily quota reached. Please try again tomorrow.",
    missing_required="Missing required argument: {key}",
    out_of_range="Argument '{key}' is out of range: {detail}",
    invalid_enum="Argument '{key}' must be one of: {allowed}",
    invalid_type="Argument '{key}' has an invalid value: {detail}",
)

JA = Messages(
    category_header="{category}カテゴリの最新ニュース:",
    keyword_header="「{keyword}」に関連するニュース:",
    headlines_header="{category}カテゴリのトップヘッドライン:",
    date_label="発行日",
    source_label="ソース",
    link_label="リンク",
    no_keyword_results="「{keyword}」に関連するニュースは見つかりませんでした。",
    no_articles="記事が見つかりませんでした。",
    unknown_tool="未知のツール: {name}",
    error_prefix="エラー: {message}",
    fetch_failed="ニュースの取得中にエラーが発生しました: {reason}",
    search_failed="ニュースの検索中にエラーが発生しました: {reason}",
    headlines_failed="トップヘッドラインの取得中にエラーが発生しました: {reason}",
    quota_exceeded="APIの1日の利用上限に達しました。明日もう一度お試しください。",
    missing_required="必須の引数がありません: {key}",
    out_of_range="引数 '{key}' が範囲外です: {detail}",
    invalid_enum="引数 '{key}' は次のいずれかである必要があります: {allowed}",
    invalid_type="引数 '{key}' の値が不正です: {detail}",
)

_CATALOGUES = {"en": EN, "ja": JA}


def get_messages(locale: str = "en") -> Messages:
    """Return the message catalogue for a locale, English when unknown."""
    return _CATALOGUES.get(locale, EN)
