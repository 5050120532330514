"""Plain-text and JSON rendering of pull request result sets."""

import json
from datetime import datetime, timezone
from typing import Optional, Sequence

from prlens.core.schema.cache import CacheStats
from prlens.core.schema.pr import PullRequest, RateLimit
from prlens.core.schema.query import DisplayFormat

NO_RESULTS = "No pull requests found."
BODY_PREVIEW_LENGTH = 150
RULE = "─" * 80


def render(
    pull_requests: Sequence[PullRequest],
    fmt: DisplayFormat,
    now: Optional[datetime] = None,
) -> str:
    if fmt is DisplayFormat.JSON:
        return json.dumps(
            [pr.to_dict() for pr in pull_requests], indent=2, ensure_ascii=False
        )
    if not pull_requests:
        return NO_RESULTS
    now = now or datetime.now(timezone.utc)
    if fmt is DisplayFormat.DETAILED:
        return _render_detailed(pull_requests, now)
    return _render_compact(pull_requests, now)


def format_relative_time(instant: datetime, now: datetime) -> str:
    """Render ``instant`` relative to ``now``, e.g. ``3 hours ago``.

    Anything 30 days or older falls back to an absolute ``Mon D, YYYY`` date.
    """
    elapsed = max((now - instant).total_seconds(), 0)
    minutes = int(elapsed // 60)
    hours = int(elapsed // 3600)
    days = int(elapsed // 86400)
    if minutes < 60:
        return f"{minutes} {_plural(minutes, 'minute')} ago"
    if hours < 24:
        return f"{hours} {_plural(hours, 'hour')} ago"
    if days < 30:
        return f"{days} {_plural(days, 'day')} ago"
    return f"{instant:%b} {instant.day}, {instant.year}"


def format_status(pr: PullRequest) -> str:
    if pr.merged_at is not None:
        return "Merged"
    if pr.closed_at is not None:
        return "Closed"
    if pr.draft:
        return "Draft"
    return "Open"


def format_rate_limit(rate_limit: RateLimit) -> str:
    percentage = (rate_limit.remaining / rate_limit.limit) * 100 if rate_limit.limit else 0
    if percentage > 50:
        health = "healthy"
    elif percentage > 20:
        health = "low"
    else:
        health = "critical"
    reset = rate_limit.reset.astimezone().strftime("%H:%M:%S")
    return (
        "API Rate Limit:\n"
        f"  {rate_limit.remaining}/{rate_limit.limit} requests remaining ({health})\n"
        f"  Resets at: {reset}"
    )


def format_cache_stats(stats: CacheStats) -> str:
    if stats.size == 0:
        return "Cache is empty"
    lines = [
        "Cache Statistics:",
        f"  Total entries: {stats.size}",
        "  Cached repositories:",
    ]
    lines.extend(f"    • {key}" for key in stats.keys)
    return "\n".join(lines)


def format_filter_summary(matched: int, total: int) -> str:
    return f"Filters applied: {matched} of {total} PRs match criteria"


def _render_compact(pull_requests: Sequence[PullRequest], now: datetime) -> str:
    lines = [_header(pull_requests)]
    for index, pr in enumerate(pull_requests, start=1):
        title_line = f"{index}. #{pr.number} [{pr.id}] {pr.title}"
        if pr.draft:
            title_line += " [DRAFT]"
        detail_line = (
            f"   @{pr.user.login} • {format_relative_time(pr.created_at, now)}"
        )
        if pr.total_comments > 0:
            detail_line += f" • {pr.total_comments} {_plural(pr.total_comments, 'comment')}"
        lines.append(f"{title_line}\n{detail_line}")
    return "\n".join(lines)


def _render_detailed(pull_requests: Sequence[PullRequest], now: datetime) -> str:
    lines = [_header(pull_requests)]
    for index, pr in enumerate(pull_requests, start=1):
        lines.append(f"{index}. PR #{pr.number}: {pr.title}")
        lines.append(RULE)
        lines.append(f"Author: {pr.user.login}")
        lines.append(f"Created: {format_relative_time(pr.created_at, now)}")
        lines.append(f"Updated: {format_relative_time(pr.updated_at, now)}")
        lines.append(f"Status: {format_status(pr)}")
        lines.append(f"URL: {pr.html_url}")
        stats = [
            f"{pr.total_comments} comments",
            f"{pr.commits} commits",
            f"+{pr.additions} -{pr.deletions}",
            f"{pr.changed_files} files",
        ]
        lines.append("Stats: " + " • ".join(stats))
        if pr.labels:
            labels = ", ".join(label.name for label in pr.labels)
            lines.append(f"Labels: {labels}")
        if pr.requested_reviewers:
            reviewers = ", ".join(f"@{r.login}" for r in pr.requested_reviewers)
            lines.append(f"Reviewers: {reviewers}")
        if pr.body:
            lines.append(f"Description: {_preview(pr.body)}")
        lines.append("")
    return "\n".join(lines)


def _header(pull_requests: Sequence[PullRequest]) -> str:
    return f"Found {len(pull_requests)} pull request(s):\n"


def _preview(body: str) -> str:
    preview = body[:BODY_PREVIEW_LENGTH].replace("\n", " ")
    if len(body) > BODY_PREVIEW_LENGTH:
        preview += "..."
    return preview


def _plural(count: int, unit: str) -> str:
    return unit if count == 1 else f"{unit}s"
