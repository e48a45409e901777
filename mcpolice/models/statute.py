"""
statute.py - Statute registry.

The registry is a static table of international-law provisions that
violation reports may reference. It is defined at import time and never
mutated afterwards.

CONSTRAINTS:
1. Lookup is exact-match and case-sensitive on the article string
2. Iteration order is definition order
3. Entries are immutable (frozen dataclasses, tuple jurisdictions)
"""

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Severity levels for statute violations."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class StatuteInfo:
    """Legal metadata for a single statute."""

    organization: str
    article: str
    description: str
    severity: Severity
    jurisdiction: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "article": self.article,
            "organization": self.organization,
            "description": self.description,
            "severity": self.severity.value,
            "jurisdiction": list(self.jurisdiction),
        }


_STATUTES: tuple[StatuteInfo, ...] = (
    # ICC: International Criminal Court (Rome Statute)
    StatuteInfo(
        organization="ICC",
        article="Rome Statute Article 6",
        description=(
            "Genocide: Acts committed with intent to destroy, in whole or in part, "
            "a national, ethnical, racial or religious group, such as killing, causing "
            "serious bodily or mental harm, inflicting conditions of life calculated to "
            "destroy, imposing measures to prevent births, or forcibly transferring children."
        ),
        severity=Severity.CRITICAL,
        jurisdiction=("INTERNATIONAL", "ICC"),
    ),
    StatuteInfo(
        organization="ICC",
        article="Rome Statute Article 7",
        description=(
            "Crimes against humanity: Widespread or systematic attacks against civilians, "
            "including murder, extermination, enslavement, deportation, imprisonment, "
            "torture, rape, persecution, enforced disappearance, apartheid, and other "
            "inhumane acts."
        ),
        severity=Severity.CRITICAL,
        jurisdiction=("INTERNATIONAL", "ICC"),
    ),
    StatuteInfo(
        organization="ICC",
        article="Rome Statute Article 8",
        description=(
            "War crimes: Grave breaches of the Geneva Conventions, including willful "
            "killing, torture, inhuman treatment, unlawful deportation, taking hostages, "
            "attacking civilians, using prohibited weapons, starvation of civilians, and "
            "conscripting children under 15 into armed forces."
        ),
        severity=Severity.CRITICAL,
        jurisdiction=("INTERNATIONAL", "ICC"),
    ),
    StatuteInfo(
        organization="ICC",
        article="Rome Statute Article 8 bis",
        description=(
            "Crime of aggression: Planning, preparation, initiation or execution of an "
            "act of aggression by a state leader that constitutes a manifest violation "
            "of the UN Charter."
        ),
        severity=Severity.CRITICAL,
        jurisdiction=("INTERNATIONAL", "ICC"),
    ),
    # IAEA: International Atomic Energy Agency
    StatuteInfo(
        organization="IAEA",
        article="IAEA Statute Article XII.C",
        description=(
            "Non-compliance with nuclear safeguards: Failure to declare nuclear material, "
            "diversion of nuclear material for non-peaceful purposes, or refusal to allow "
            "inspections."
        ),
        severity=Severity.CRITICAL,
        jurisdiction=("INTERNATIONAL", "IAEA"),
    ),
    StatuteInfo(
        organization="IAEA",
        article="INFCIRC/153",
        description=(
            "Breach of comprehensive safeguards agreements: Failure to provide "
            "information, denial of access to facilities, or concealment of nuclear "
            "activities."
        ),
        severity=Severity.CRITICAL,
        jurisdiction=("INTERNATIONAL", "IAEA"),
    ),
    StatuteInfo(
        organization="IAEA",
        article="INFCIRC/540",
        description=(
            "Breach of Additional Protocol: Failure to provide expanded information or "
            "access as required for verification of peaceful use of nuclear material."
        ),
        severity=Severity.HIGH,
        jurisdiction=("INTERNATIONAL", "IAEA"),
    ),
    StatuteInfo(
        organization="IAEA",
        article="NPT Article III",
        description=(
            "Violation of the Treaty on the Non-Proliferation of Nuclear Weapons: "
            "Non-compliance with obligations to prevent the spread of nuclear weapons "
            "and technology."
        ),
        severity=Severity.CRITICAL,
        jurisdiction=("INTERNATIONAL", "IAEA"),
    ),
    # WFO: World Food Organization
    StatuteInfo(
        organization="WFO",
        article="International Humanitarian Law (Geneva Conventions, Protocols)",
        description=(
            "Starvation of civilians as a method of warfare: Prohibited to attack, "
            "destroy, remove, or render useless objects indispensable to the survival "
            "of the civilian population, such as foodstuffs, crops, livestock, and "
            "water supplies."
        ),
        severity=Severity.CRITICAL,
        jurisdiction=("INTERNATIONAL", "WFO"),
    ),
    StatuteInfo(
        organization="WFO",
        article="Universal Declaration of Human Rights Article 25",
        description=(
            "Denial of the right to adequate food: Failure to ensure access to "
            "sufficient, safe, and nutritious food for all people."
        ),
        severity=Severity.HIGH,
        jurisdiction=("INTERNATIONAL", "UN"),
    ),
    StatuteInfo(
        organization="WFO",
        article="Fourth Geneva Convention Article 33",
        description=(
            "Collective punishment: Prohibition of punishing protected persons for "
            "offenses they have not personally committed, including through denial of "
            "food or humanitarian aid."
        ),
        severity=Severity.HIGH,
        jurisdiction=("INTERNATIONAL", "WFO"),
    ),
    # UNESCO: United Nations Educational, Scientific and Cultural Organization
    StatuteInfo(
        organization="UNESCO",
        article="1954 Hague Convention Article 4",
        description=(
            "Protection of cultural property in armed conflict: Prohibition of use, "
            "theft, pillage, or destruction of cultural property during armed conflict."
        ),
        severity=Severity.HIGH,
        jurisdiction=("INTERNATIONAL", "UNESCO"),
    ),
    StatuteInfo(
        organization="UNESCO",
        article="1999 Second Protocol Article 15",
        description=(
            "Serious violations against cultural property: Attacking, using for "
            "military purposes, extensive destruction, theft, pillage, or vandalism of "
            "protected cultural property."
        ),
        severity=Severity.HIGH,
        jurisdiction=("INTERNATIONAL", "UNESCO"),
    ),
    StatuteInfo(
        organization="UNESCO",
        article="1970 Convention Article 3",
        description=(
            "Illicit trafficking of cultural property: Prohibition of the import, "
            "export, or transfer of ownership of cultural property contrary to the "
            "provisions of the Convention."
        ),
        severity=Severity.MEDIUM,
        jurisdiction=("INTERNATIONAL", "UNESCO"),
    ),
    StatuteInfo(
        organization="UNESCO",
        article="World Heritage Convention Article 11(4)",
        description=(
            "Failure to protect World Heritage sites: Allowing serious and specific "
            "dangers to threaten the conservation of cultural and natural heritage of "
            "outstanding universal value."
        ),
        severity=Severity.MEDIUM,
        jurisdiction=("INTERNATIONAL", "UNESCO"),
    ),
)

INTERNATIONAL_STATUTES: dict[str, StatuteInfo] = {s.article: s for s in _STATUTES}


def get_statute_info(article: str) -> StatuteInfo | None:
    """Look up a statute by its exact article name. Returns None if unknown."""
    return INTERNATIONAL_STATUTES.get(article)


def get_all_statutes() -> list[StatuteInfo]:
    """All registered statutes, in definition order."""
    return list(INTERNATIONAL_STATUTES.values())
