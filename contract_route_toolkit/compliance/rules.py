"""
Compliance rule battery.

Rules are declarative descriptors (see ``ComplianceRule``) evaluated by a
single generic evaluator. A ``RuleSet`` groups them the way an audit runs:

- base rules, evaluated for every contract type
- domain rules, evaluated only for their contract type
- supplemental pattern rules, which add an item only when they match

Adding a rule only needs a new YAML entry.
"""

from typing import Optional

from contract_route_toolkit.config.settings import load_rules
from contract_route_toolkit.models.schemas import (
    CheckStatus,
    ComplianceCheckItem,
    ComplianceRule,
    ContractType,
)


# =============================================================================
# Rule Evaluation
# =============================================================================

def normalize_content(content: str) -> str:
    """Lowercase contract text for keyword matching."""
    return (content or "").lower()


def rule_matches(rule: ComplianceRule, normalized: str) -> bool:
    """
    Check whether any of a rule's keywords occurs in normalized text.

    Args:
        rule: Rule to test
        normalized: Lowercased contract text

    Returns:
        True if at least one keyword is contained in the text
    """
    return any(keyword.lower() in normalized for keyword in rule.keywords)


def evaluate_rule(rule: ComplianceRule, normalized: str) -> ComplianceCheckItem:
    """
    Evaluate one battery rule, producing exactly one check item.

    A match yields the rule's status (Pass for battery rules); no match
    yields Fail. The recommendation is only carried on non-passing items.

    Args:
        rule: Rule to evaluate
        normalized: Lowercased contract text

    Returns:
        ComplianceCheckItem for this rule
    """
    status = rule.status if rule_matches(rule, normalized) else CheckStatus.FAIL

    return ComplianceCheckItem(
        category=rule.category,
        requirement=rule.requirement,
        status=status,
        description=rule.description,
        recommendation=None if status == CheckStatus.PASS else rule.recommendation,
    )


# =============================================================================
# Rule Set
# =============================================================================

class RuleSet:
    """
    The full battery of compliance rules for all contract types.

    Example:
        >>> rules = RuleSet.from_config()
        >>> checks = rules.evaluate(text, ContractType.SERVICE_AGREEMENT)
    """

    def __init__(
        self,
        base_rules: list[ComplianceRule],
        domain_rules: Optional[dict[ContractType, list[ComplianceRule]]] = None,
        supplemental_rules: Optional[list[ComplianceRule]] = None,
        type_recommendations: Optional[dict[ContractType, list[str]]] = None
    ):
        """
        Initialize the rule set.

        Args:
            base_rules: Rules evaluated for every contract
            domain_rules: Extra rules per contract type
            supplemental_rules: Pattern rules appended only on match
            type_recommendations: Fixed recommendations per contract type
        """
        self.base_rules = list(base_rules)
        self.domain_rules = domain_rules or {}
        self.supplemental_rules = supplemental_rules or []
        self.type_recommendations = type_recommendations or {}

    @classmethod
    def from_dict(cls, data: dict) -> "RuleSet":
        """
        Build a rule set from a parsed rules mapping.

        Args:
            data: Mapping with base_rules, domain_rules, supplemental_rules
                and type_recommendations keys

        Returns:
            Configured RuleSet

        Raises:
            ValueError: If a contract type key is unknown
        """
        base = [ComplianceRule(**r) for r in data.get("base_rules", [])]

        domain = {
            ContractType(type_key): [ComplianceRule(**r) for r in rules]
            for type_key, rules in (data.get("domain_rules") or {}).items()
        }

        supplemental = []
        for rule_data in data.get("supplemental_rules", []):
            rule_data = {"status": CheckStatus.WARNING, **rule_data}
            supplemental.append(ComplianceRule(**rule_data))

        recommendations = {
            ContractType(type_key): list(items)
            for type_key, items in (data.get("type_recommendations") or {}).items()
        }

        return cls(
            base_rules=base,
            domain_rules=domain,
            supplemental_rules=supplemental,
            type_recommendations=recommendations,
        )

    @classmethod
    def from_config(cls, path=None) -> "RuleSet":
        """Load the rule set from a YAML file (bundled rules by default)."""
        return cls.from_dict(load_rules(path))

    def rules_for(self, contract_type: ContractType) -> list[ComplianceRule]:
        """Battery rules (base then domain) that apply to a contract type."""
        contract_type = ContractType(contract_type)
        return self.base_rules + self.domain_rules.get(contract_type, [])

    def recommendations_for(self, contract_type: ContractType) -> list[str]:
        """Fixed recommendations appended for a contract type."""
        return list(self.type_recommendations.get(ContractType(contract_type), []))

    def evaluate(
        self,
        content: str,
        contract_type: ContractType
    ) -> list[ComplianceCheckItem]:
        """
        Run the whole battery against contract text.

        Args:
            content: Raw contract text
            contract_type: Type selecting the domain rules

        Returns:
            One item per battery rule, in rule order, followed by one item
            per matching supplemental rule
        """
        normalized = normalize_content(content)

        checks = [evaluate_rule(rule, normalized) for rule in self.rules_for(contract_type)]

        for rule in self.supplemental_rules:
            if rule_matches(rule, normalized):
                checks.append(ComplianceCheckItem(
                    category=rule.category,
                    requirement=rule.requirement,
                    status=rule.status,
                    description=rule.description,
                    recommendation=rule.recommendation,
                ))

        return checks

    def __len__(self) -> int:
        return (
            len(self.base_rules)
            + sum(len(rules) for rules in self.domain_rules.values())
            + len(self.supplemental_rules)
        )
