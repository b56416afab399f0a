# client/core/render.py

from datetime import datetime, timezone
from html import escape


MAX_TRAIT_SIZE = 8

DATE_FORMATS = {
    "Month D, YYYY": "%B %d, %Y",
    "YYYY-MM-DD": "%Y-%m-%d",
    "MM/DD/YYYY": "%m/%d/%Y",
    "DD/MM/YYYY": "%d/%m/%Y",
}
DEFAULT_DATE_FORMAT = "%B %d, %Y"


def format_when(ms, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    if ms is None:
        return ""
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).strftime(fmt)


def timeline_item_html(achievement: dict, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    traits = "".join(f"<li>{escape(t)}</li>" for t in achievement.get("achieveHow") or [])
    return (
        f'<div class="timeline-item" date-is="{escape(format_when(achievement.get("achieveWhen"), date_format))}">'
        f'<a href="#" class="js-get-achievement" id="{escape(str(achievement.get("id", "")))}">'
        f'<h2>{escape(achievement.get("achieveWhat") or "")}</h2></a>'
        f'<p>{escape(achievement.get("achieveWhy") or "")}</p>'
        f'<p>It took: <ul class="timeline-ul">{traits}</ul></p>'
        f'</div>'
    )


def timeline_html(achievements: list[dict], date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Builds the timeline fragment, one block per achievement in the order given.
    No achievements gives an empty container.
    """
    items = "".join(timeline_item_html(a, date_format) for a in achievements)
    return f'<div class="timeline-container">{items}</div>'


def _paragraphs(achievements: list[dict], field: str) -> str:
    return "".join(
        f"<p>{escape(a[field])}</p>"
        for a in achievements
        if a.get(field) is not None
    )


def what_html(achievements: list[dict]) -> str:
    return _paragraphs(achievements, "achieveWhat")


def why_html(achievements: list[dict]) -> str:
    return _paragraphs(achievements, "achieveWhy")


def trait_counts(achievements: list[dict]) -> dict[str, int]:
    """
    Counts trait occurrences case-insensitively, keyed by the first spelling seen.
    """
    counts: dict[str, int] = {}
    spelling: dict[str, str] = {}
    for achievement in achievements:
        for trait in achievement.get("achieveHow") or []:
            key = spelling.setdefault(trait.casefold(), trait)
            counts[key] = counts.get(key, 0) + 1
    return counts


def traits_html(counts: dict[str, int]) -> str:
    # size class grows with frequency, capped so the stylesheet covers every class
    return "".join(
        f'<span class="size-{min(count, MAX_TRAIT_SIZE)}"> {escape(trait.lower())} </span>'
        for trait, count in counts.items()
    )


def trait_cloud_css() -> str:
    rules = "".join(
        f".size-{n} {{ font-size: {0.9 + 0.35 * (n - 1):.2f}rem; }}"
        for n in range(1, MAX_TRAIT_SIZE + 1)
    )
    return f"<style>{rules}</style>"
