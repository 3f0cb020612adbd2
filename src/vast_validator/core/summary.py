# src/vast_validator/core/summary.py
import logging
from typing import Dict

from vast_validator.model import CategorySummary, NodeResult, ResultStatus

logger = logging.getLogger(__name__)

DEFAULT_MAX_REASONS = 5


def summarize_categories(root: NodeResult, max_reasons: int = DEFAULT_MAX_REASONS) -> Dict[str, CategorySummary]:
    """
    Rolls node results up into one CategorySummary per analysis category.

    Walks the tree in document order, so the sampled reasons are the first
    failures encountered. Only the reason sample depends on the walk order.

    Args:
        root: The root of the result tree.
        max_reasons: Cap on sampled failure reasons per category.

    Returns:
        Dict[str, CategorySummary]: Empty when no node carries any analysis.
    """
    summaries: Dict[str, CategorySummary] = {}

    for node in root.iter():
        for category, analysis in node.analyses.items():
            summary = summaries.get(category)
            if summary is None:
                summary = CategorySummary(category=category, status=ResultStatus.PASS)
                summaries[category] = summary

            summary.total_nodes += 1
            if not analysis.failed:
                continue

            summary.failing_nodes += 1
            summary.status = ResultStatus.FAIL
            for reason in analysis.reasons:
                if len(summary.reasons) >= max_reasons:
                    break
                summary.reasons.append(reason)

    logger.debug("Summarized %d categories", len(summaries))
    return summaries
