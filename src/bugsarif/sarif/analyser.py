# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Turn a bug collection into SARIF rules, results, and source roots."""

from __future__ import annotations

import logging

from bugsarif.core.constants import DEFAULT_MESSAGE_ID, Level, RankCategory
from bugsarif.core.exceptions import UnknownRankError
from bugsarif.models.bug import BugCollection, BugInstance, BugPattern
from bugsarif.models.sarif import (
    SarifArtifactLocation,
    SarifMessage,
    SarifMultiformatMessage,
    SarifPropertyBag,
    SarifReportingDescriptor,
    SarifResult,
)
from bugsarif.sarif.locations import LocationHandler, UriBaseRegistry
from bugsarif.sarif.placeholders import Placeholder, parse_message_template
from bugsarif.sources.finder import SourceFinder

logger = logging.getLogger("bugsarif.sarif.analyser")


def to_level(bug_rank: int) -> Level:
    """Map a bug rank onto a SARIF level.

    Raises:
        UnknownRankError: If the rank has no category in the rank table.
    """
    category = RankCategory.from_rank(bug_rank)
    match category:
        case RankCategory.SCARIEST | RankCategory.SCARY:
            return Level.ERROR
        case RankCategory.TROUBLING:
            return Level.WARNING
        case RankCategory.OF_CONCERN:
            return Level.NOTE
        case _:
            msg = f"Illegal bug rank given: {bug_rank}"
            raise UnknownRankError(msg)


class BugCollectionAnalyser:
    """Single pass over a bug collection.

    Rules are created once per bug type, in first-seen order; a rule's
    position in :attr:`rules` is its ``ruleIndex``.  Results keep the
    collection's order.
    """

    def __init__(
        self,
        bug_collection: BugCollection,
        source_finder: SourceFinder,
        registry: UriBaseRegistry | None = None,
    ) -> None:
        self.bug_collection = bug_collection
        self.registry = registry if registry is not None else UriBaseRegistry()
        self.location_handler = LocationHandler(source_finder, self.registry)
        self.rules: list[SarifReportingDescriptor] = []
        self.results: list[SarifResult] = []
        self._type_to_index: dict[str, int] = {}
        self._index_to_placeholders: list[list[Placeholder]] = []

        for bug in bug_collection:
            self.results.append(self.build_result(bug))
        logger.debug("Analysed %d bugs into %d rules", len(self.results), len(self.rules))

    @property
    def original_uri_base_ids(self) -> dict[str, SarifArtifactLocation]:
        return self.registry.to_original_uri_base_ids()

    def ensure_rule(self, pattern: BugPattern) -> int:
        """Return the rule index of *pattern*, creating the rule on first use."""
        index = self._type_to_index.get(pattern.type)
        if index is None:
            index = self._process_rule(pattern)
            self._type_to_index[pattern.type] = index
        return index

    def placeholders(self, rule_index: int) -> list[Placeholder]:
        return self._index_to_placeholders[rule_index]

    def build_result(self, bug: BugInstance) -> SarifResult:
        index = self.ensure_rule(self.bug_collection.pattern_for(bug))
        primary_class = bug.primary_class
        arguments = [
            placeholder.to_argument(bug.annotations, primary_class)
            for placeholder in self.placeholders(index)
        ]
        location = self.location_handler.to_location(bug)
        return SarifResult(
            ruleId=bug.type,
            ruleIndex=index,
            level=to_level(bug.rank),
            message=SarifMessage(id=DEFAULT_MESSAGE_ID, arguments=arguments),
            locations=[location] if location is not None else [],
        )

    def _process_rule(self, pattern: BugPattern) -> int:
        assert len(self._index_to_placeholders) == len(self.rules)
        rule_index = len(self.rules)

        formatted_message, placeholders = parse_message_template(pattern.long_description)
        self.rules.append(_to_rule(pattern, formatted_message))
        self._index_to_placeholders.append(placeholders)
        return rule_index


def _to_rule(pattern: BugPattern, formatted_message: str) -> SarifReportingDescriptor:
    tags = [pattern.category] if pattern.category.strip() else []
    return SarifReportingDescriptor(
        id=pattern.type,
        shortDescription=SarifMultiformatMessage(text=pattern.short_description),
        fullDescription=SarifMultiformatMessage(text=pattern.detail_text),
        messageStrings={DEFAULT_MESSAGE_ID: SarifMultiformatMessage(text=formatted_message)},
        helpUri=pattern.help_uri,
        properties=SarifPropertyBag(tags=tags),
    )
