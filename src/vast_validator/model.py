# src/vast_validator/model.py (Result Layer)
import json
import logging
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

# Spec-compliance checks encoded in the catalog.
IAB_ANALYSIS_CATEGORY = "iab.analysis"
# Default bucket for caller-supplied hooks.
CUSTOM_ANALYSIS_CATEGORY = "custom.analysis"


class ResultStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    INFO = "info"


class ResultModel(BaseModel):
    """
    Base for every serialisable result object.

    Field names are exported in camelCase, and empty collections or unset
    values are omitted to keep serialised reports compact.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler) -> Dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None and value != [] and value != {}}


class AttributeResult(ResultModel):
    """Outcome of validating one attribute (present or missing-but-required)."""
    name: str
    version_support: Optional[List[str]] = None
    status: ResultStatus = ResultStatus.PASS
    reasons: List[str] = Field(default_factory=list)

    def add_reason(self, reason: str) -> None:
        if reason:
            self.reasons.append(reason)


class NodeAnalysisResult(ResultModel):
    """
    All results of one analysis category for one node.

    Once the status is FAIL it stays FAIL for the rest of the validation pass.
    """
    category: str = ""
    status: ResultStatus = ResultStatus.PASS
    reasons: List[str] = Field(default_factory=list)
    attributes: List[AttributeResult] = Field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status == ResultStatus.FAIL

    def add_attribute(self, result: AttributeResult) -> None:
        self.attributes.append(result)

    def mark_failure(self, *reasons: str) -> None:
        """Flips the bucket to FAIL and records the non-empty reasons."""
        self.status = ResultStatus.FAIL
        for reason in reasons:
            if reason:
                self.reasons.append(reason)


class NodeResult(ResultModel):
    """Validation result of one parsed node, mirroring the document tree."""
    node: str
    version_support: Optional[List[str]] = None
    analyses: Dict[str, NodeAnalysisResult] = Field(default_factory=dict)
    children: List['NodeResult'] = Field(default_factory=list)

    def add_analysis(self, category: str) -> NodeAnalysisResult:
        """Returns the bucket for the category, creating a passing one if needed."""
        analysis = self.analyses.get(category)
        if analysis is None:
            analysis = NodeAnalysisResult(category=category, status=ResultStatus.PASS)
            self.analyses[category] = analysis
        return analysis

    def merge(self, analysis: NodeAnalysisResult) -> NodeAnalysisResult:
        """
        Merges a hook contribution into the bucket of the same category.

        Attribute results are concatenated; a failing contribution fails the
        bucket and adds its reasons, and a passing one never downgrades it.
        """
        existing = self.analyses.get(analysis.category)
        if existing is None:
            self.analyses[analysis.category] = analysis
            return analysis

        existing.attributes.extend(analysis.attributes)
        if analysis.failed:
            existing.mark_failure(*analysis.reasons)
        return existing

    def iter(self) -> Iterator['NodeResult']:
        """Pre-order (document order) walk over this result and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find(self, name: str) -> Optional['NodeResult']:
        """Returns the first node result with this name in document order."""
        return next((result for result in self.iter() if result.node == name), None)

    def find_all(self, name: str) -> List['NodeResult']:
        return [result for result in self.iter() if result.node == name]


class CategorySummary(ResultModel):
    """Whole-tree roll-up of one analysis category."""
    category: str
    total_nodes: int = 0
    failing_nodes: int = 0
    status: ResultStatus = ResultStatus.PASS
    reasons: List[str] = Field(default_factory=list)


class ValidationResult(ResultModel):
    """The sole return value of a successful validation call."""
    version: str
    root: NodeResult
    summaries: Dict[str, CategorySummary] = Field(default_factory=dict)

    @property
    def passed(self) -> bool:
        """True when no category summary failed."""
        return all(summary.status != ResultStatus.FAIL for summary in self.summaries.values())

    def find(self, name: str) -> Optional[NodeResult]:
        return self.root.find(name)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
