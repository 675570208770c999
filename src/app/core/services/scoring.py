"""Weighted multi-field relevance scoring."""
import logging
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from src.app.core.domain.models import Contract, EntityType, ScoredResult, User, Vendor
from src.app.core.services.field_weights import (
    CONTRACT_SEARCH_FIELDS,
    USER_SEARCH_FIELDS,
    VENDOR_SEARCH_FIELDS,
    FieldWeightTable,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _searchable_text(value: Any) -> str | None:
    """Lowercased text of a field value, or None when the field is empty."""
    if not value:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(str(part) for part in value).lower()
    return str(value).lower()


class EntityScorer(Generic[T]):
    """
    Scores records of one entity type against a query.

    Each searchable field whose text contains the query adds its weight to
    the record's score and its name to the highlights. Records that match
    no field are dropped; the rest are ordered by score descending, keeping
    the input order between equal scores.
    """

    def __init__(
        self,
        entity_type: EntityType,
        fields: tuple[str, ...],
        weights: FieldWeightTable,
    ):
        """
        Initialize the scorer.

        Args:
            entity_type: Collection being scored; prefixes the weight keys
            fields: Searchable field names in scan order
            weights: Weight table shared by all scorers
        """
        if not fields:
            raise ValueError("A scorer needs at least one searchable field")
        self.entity_type = entity_type
        self.fields = fields
        self.weights = weights

    def score_one(self, item: T, query: str) -> ScoredResult[T]:
        """
        Score a single record without dropping it.

        Args:
            item: Record to score
            query: Trimmed, lowercased query

        Returns:
            ScoredResult with score 0 and no highlights when nothing matched
        """
        score = 0.0
        highlights: list[str] = []
        for field in self.fields:
            text = _searchable_text(getattr(item, field, None))
            if text is not None and query in text:
                score += self.weights.weight(self.entity_type, field)
                highlights.append(field)
        return ScoredResult(item=item, score=score, highlights=highlights)

    def score(self, items: Iterable[T], query: str) -> list[ScoredResult[T]]:
        """
        Score records, drop non-matches and rank the rest.

        Args:
            items: Candidate records
            query: Trimmed, lowercased query

        Returns:
            Matching records as ScoredResult, highest score first
        """
        if not query:
            return []

        scored = [self.score_one(item, query) for item in items]
        matches = [result for result in scored if result.score > 0]
        # list.sort is stable, so equal scores keep their input order
        matches.sort(key=lambda r: r.score, reverse=True)

        logger.debug(
            "Scored %d %s against '%s': %d matched",
            len(scored), self.entity_type.value, query[:100], len(matches),
        )
        return matches


def contract_scorer(weights: FieldWeightTable) -> EntityScorer[Contract]:
    return EntityScorer(EntityType.CONTRACTS, CONTRACT_SEARCH_FIELDS, weights)


def vendor_scorer(weights: FieldWeightTable) -> EntityScorer[Vendor]:
    return EntityScorer(EntityType.VENDORS, VENDOR_SEARCH_FIELDS, weights)


def user_scorer(weights: FieldWeightTable) -> EntityScorer[User]:
    return EntityScorer(EntityType.USERS, USER_SEARCH_FIELDS, weights)
