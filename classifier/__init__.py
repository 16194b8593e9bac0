"""
Heuristic transaction text classification.

This package contains:
- classify: Free text -> query, transaction or unrecognized
- rules: Keyword tables and ordered domain rules
- replies: Chat reply templates for classification results
"""
from classifier.classify import classify
from classifier.rules import DEFAULT_RULES, DEFAULT_TRANSACTION_KIND, DomainRule, RuleSet

__all__ = ["classify", "DEFAULT_RULES", "DEFAULT_TRANSACTION_KIND", "DomainRule", "RuleSet"]
