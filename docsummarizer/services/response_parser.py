"""Response Parser - turns raw model output into summary and insights.

Model output does not reliably follow the requested JSON schema, so parsing
degrades in three tiers and never raises:

1. Strict JSON: the greedy ``{...}`` span is decoded and its ``summary`` used.
2. Line heuristics: section headers switch between prose and list modes.
3. Raw fallback: a truncated prefix of the response plus a sentinel insight.
"""

import json
import logging
import re
from typing import Any, List, Optional

from docsummarizer.models.summary import ParsedInsightSet

logger = logging.getLogger(__name__)

RAW_SUMMARY_LIMIT = 500
MIN_PROSE_LINE_LENGTH = 20

NO_INSIGHTS_SENTINEL = "No specific insights could be extracted"
PARSE_FAILED_SENTINEL = "Response parsing failed - see summary for details"

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_LIST_MARKER_RE = re.compile(r"^(?:[-•]|\d+\.)\s*")


def _parse_json_object(raw_text: str) -> Optional[ParsedInsightSet]:
    match = _JSON_OBJECT_RE.search(raw_text)
    if not match:
        return None

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.debug(f"JSON object in response did not decode: {e}")
        return None

    if not isinstance(data, dict):
        return None

    summary = data.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        return None

    insights: Any = data.get("keyInsights")
    key_insights: List[str] = []
    if isinstance(insights, list):
        key_insights = [
            item if isinstance(item, str) else json.dumps(item, ensure_ascii=False)
            for item in insights
        ]

    return ParsedInsightSet(summary=summary, key_insights=key_insights)


def _parse_sections(raw_text: str) -> ParsedInsightSet:
    lines = [line.strip() for line in raw_text.split("\n")]
    lines = [line for line in lines if line]

    summary_parts: List[str] = []
    key_insights: List[str] = []
    in_insights = False

    for line in lines:
        lowered = line.lower()

        if "summary" in lowered or "overview" in lowered:
            in_insights = False
            continue

        if "insight" in lowered or "key point" in lowered:
            in_insights = True
            continue

        if in_insights and _LIST_MARKER_RE.match(line):
            key_insights.append(_LIST_MARKER_RE.sub("", line, count=1).strip())
        elif not in_insights and len(line) > MIN_PROSE_LINE_LENGTH:
            summary_parts.append(line)

    return ParsedInsightSet(summary=" ".join(summary_parts), key_insights=key_insights)


def _truncate(raw_text: str) -> str:
    if len(raw_text) > RAW_SUMMARY_LIMIT:
        return raw_text[:RAW_SUMMARY_LIMIT] + "..."
    return raw_text


def parse_response(raw_text: str) -> ParsedInsightSet:
    """Recover a summary and key insights from raw model output.

    Args:
        raw_text: Text returned by the provider.

    Returns:
        Best-effort parsed result. Never raises.
    """
    raw_text = raw_text or ""

    parsed = _parse_json_object(raw_text)
    if parsed is not None:
        return parsed

    logger.warning("Model response is not strict JSON, falling back to section parsing")
    sections = _parse_sections(raw_text)
    summary = sections.summary.strip()
    key_insights = [item for item in sections.key_insights if item]

    if not summary and not key_insights:
        logger.warning("Section parsing found nothing, returning raw response prefix")
        return ParsedInsightSet(
            summary=_truncate(raw_text.strip()) or PARSE_FAILED_SENTINEL,
            key_insights=[PARSE_FAILED_SENTINEL],
        )

    return ParsedInsightSet(
        summary=summary or _truncate(raw_text.strip()),
        key_insights=key_insights or [NO_INSIGHTS_SENTINEL],
    )
