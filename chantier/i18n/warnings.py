"""Localized display of budget-analysis warnings and recommendations.

Plan analysis reports its warnings as prefixed French (or occasionally
English) sentences such as `❓ Ambiguïté: Superficie exacte non visible`.
Known whole messages are swapped for a catalog entry. Otherwise the prefix
is translated and, for the missing-element, ambiguity and inconsistency
kinds, the sentence after it is looked up too. Anything unknown is shown as
received.

Catalog layout under `budgetWarnings`:
- `prefixes.<kind>`: translated prefix, emoji included.
- `full.<kind>`: translated complete message.
- `missing.*`, `ambiguities.*`, `inconsistencies.*`: sentence bodies.
- `multiLotAnalysis`: recommendation template with `{{lots}}` and `{{plans}}`.
"""

from __future__ import annotations

import re
from typing import Iterable

from .catalog import TranslationFunction
from .resolver import CanonicalKeyResolver, frozen_table

_WARNING = "\u26a0\ufe0f"
_SITE = "\U0001f3d7\ufe0f"

# Checked in order; the first prefix whose translation exists wins.
WARNING_PREFIXES: tuple[tuple[str, str], ...] = (
    (f"{_WARNING} Élément manquant:", "missingElement"),
    (f"{_WARNING} Missing element:", "missingElement"),
    ("❓ Ambiguïté:", "ambiguity"),
    ("❓ Ambiguity:", "ambiguity"),
    ("⚡ Incohérence:", "inconsistency"),
    ("⚡ Inconsistency:", "inconsistency"),
    (f"{_SITE} PRÉPARATION DU SITE:", "sitePreparation"),
    (f"{_SITE} SITE PREPARATION:", "sitePreparation"),
    ("🚧 PERMIS ET INSPECTIONS:", "permitsInspections"),
    ("🚧 PERMITS AND INSPECTIONS:", "permitsInspections"),
    ("📋 SERVICES PUBLICS:", "publicServices"),
    ("📋 UTILITIES:", "publicServices"),
    ("🔗 JUMELAGE STRUCTUREL:", "structuralJoining"),
    ("🔗 STRUCTURAL CONNECTION:", "structuralJoining"),
    ("⚡ RACCORDEMENT ÉLECTRIQUE:", "electricalConnection"),
    ("⚡ ELECTRICAL CONNECTION:", "electricalConnection"),
    ("🔌 RACCORDEMENT PLOMBERIE:", "plumbingConnection"),
    ("🔌 PLUMBING CONNECTION:", "plumbingConnection"),
    ("🏠 IMPERMÉABILISATION:", "waterproofing"),
    ("🏠 WATERPROOFING:", "waterproofing"),
    ("🎨 HARMONISATION:", "harmonization"),
    ("🎨 HARMONIZATION:", "harmonization"),
    ("🔥 COUPE-FEU:", "fireSeparation"),
    ("🔥 FIRE SEPARATION:", "fireSeparation"),
)

FULL_WARNINGS = frozen_table(
    {
        f"{_SITE} PRÉPARATION DU SITE: Vérifier les coûts d'excavation, nivellement, "
        "et accès chantier": "sitePreparation",
        f"{_SITE} SITE PREPARATION: Verify excavation, grading, and site access costs": (
            "sitePreparation"
        ),
        "🚧 PERMIS ET INSPECTIONS: Frais de permis de construction et inspections "
        "municipales à prévoir": "permitsInspections",
        "🚧 PERMITS AND INSPECTIONS: Building permit fees and municipal inspections "
        "to be planned": "permitsInspections",
        "📋 SERVICES PUBLICS: Confirmer les raccordements (eau, égout, électricité, gaz) "
        "et frais associés": "publicServices",
        "📋 UTILITIES: Confirm connections (water, sewer, electricity, gas) "
        "and associated fees": "publicServices",
        "🔗 JUMELAGE STRUCTUREL: Travaux de connexion à la structure existante "
        "(linteaux, ancrages, renfort fondation)": "structuralJoining",
        "🔗 STRUCTURAL CONNECTION: Connection work to existing structure "
        "(lintels, anchors, foundation reinforcement)": "structuralJoining",
        "⚡ RACCORDEMENT ÉLECTRIQUE: Extension du panneau existant et mise aux normes "
        "possiblement requise": "electricalConnection",
        "⚡ ELECTRICAL CONNECTION: Existing panel extension and possible code upgrade "
        "required": "electricalConnection",
        "🔌 RACCORDEMENT PLOMBERIE: Connexion aux systèmes existants "
        "(eau, drainage, chauffage)": "plumbingConnection",
        "🔌 PLUMBING CONNECTION: Connection to existing systems "
        "(water, drainage, heating)": "plumbingConnection",
        "🏠 IMPERMÉABILISATION: Joint d'étanchéité entre nouvelle et ancienne "
        "construction critique": "waterproofing",
        "🏠 WATERPROOFING: Critical sealing joint between new and existing "
        "construction": "waterproofing",
        "🎨 HARMONISATION: Travaux de finition pour raccorder les matériaux "
        "extérieurs existants": "harmonization",
        "🎨 HARMONIZATION: Finishing work to match existing exterior materials": (
            "harmonization"
        ),
        "🔥 COUPE-FEU: Vérifier les exigences de séparation coupe-feu entre garage "
        "et habitation": "fireSeparation",
        "🔥 FIRE SEPARATION: Verify fire separation requirements between garage "
        "and dwelling": "fireSeparation",
    }
)

MISSING_ELEMENTS = frozen_table(
    {
        "Plans de plancher détaillés": "floorPlans",
        "Spécifications d'isolation": "insulationSpecs",
        "Détails électriques et plomberie": "electricalPlumbing",
        "Finitions intérieures": "interiorFinishes",
        "Dimensions exactes de toutes les fenêtres": "windowDimensions",
        "Toiture et couverture": "roofing",
        "Fenêtres et portes extérieures": "windowsDoors",
        "Revêtement extérieur": "exteriorSiding",
        "Isolation détaillée": "insulationDetailed",
        "Système CVAC": "hvac",
        "Cuisine et salles de bain finies": "kitchenBathroom",
        "Détails spécifiques des fenêtres (dimensions exactes, types)": "windowDetails",
        "Spécifications électriques et plomberie": "electricalPlumbingSpecs",
        "Détails de finition intérieure": "interiorFinishDetails",
        "Type de revêtement extérieur": "sidingType",
        "Système de chauffage": "heatingSystem",
        "Détails spécifiques des fenêtres et dimensions exactes": "windowSpecificDetails",
        "Finitions intérieures détaillées": "interiorFinishesDetailed",
        "Revêtement extérieur spécifié": "exteriorSidingSpecified",
        "Fenêtres et portes - dimensions non visibles": "windowsDoorsDimensionsNotVisible",
        "Électricité - circuits non détaillés": "electricalCircuitsNotDetailed",
        "Plomberie - appareils non spécifiés": "plumbingAppliancesNotSpecified",
        "Finitions intérieures - matériaux non précisés": (
            "interiorFinishesMaterialsNotSpecified"
        ),
        "Comptoirs": "countertops",
        "Armoires de cuisine": "kitchenCabinets",
        "Vanités": "vanities",
        "Escalier": "staircase",
        "Rampes et garde-corps": "railings",
        "Planchers": "flooring",
        "Peinture": "paint",
        "Portes intérieures": "interiorDoors",
        "Moulures et plinthes": "trimBaseboards",
        "Luminaires": "lightFixtures",
        "Prises et interrupteurs": "outletsSwitches",
        "Robinetterie": "faucets",
        "Appareils sanitaires": "sanitaryFixtures",
        "Ventilation": "ventilation",
        "Système de climatisation": "airConditioning",
        "Foyer ou poêle": "fireplaceOrStove",
        "Garage": "garage",
        "Terrasse ou balcon": "deckOrBalcony",
        "Aménagement paysager": "landscaping",
        "Entrée de garage": "driveway",
        "Clôture": "fence",
    }
)

AMBIGUITIES = frozen_table(
    {
        "Dimensions exactes du bâtiment non clairement indiquées": "buildingDimensions",
        "Types précis de fenêtres difficiles à distinguer": "windowTypes",
        "Hauteur exacte des murs de fondation à confirmer": "foundationWallHeight",
        "Hauteur exacte des murs de fondation": "foundationWallHeightSimple",
        "Type exact de finition de plancher": "floorFinishType",
        "Spécifications des systèmes mécaniques": "mechanicalSpecs",
        "Nombre exact et dimensions des fenêtres non spécifiées": "windowCountDimensions",
        "Hauteur exacte des murs (estimé 9')": "wallHeightEstimated9",
        "Type de fondation (estimé béton coulé standard)": "foundationTypeEstimated",
        "Nombre exact et dimensions des fenêtres non clairement indiqués": (
            "windowCountDimensionsNotClear"
        ),
        "Type de revêtement extérieur non spécifié": "exteriorSidingNotSpecified",
        "Hauteur exacte des murs non précisée": "wallHeightNotSpecified",
        "Hauteur exacte des murs - estimée à 8'": "wallHeightEstimated8",
        "Type exact de revêtement extérieur": "exteriorSidingType",
        "Nombre et dimensions des fenêtres": "windowCountAndDimensions",
        "Superficie exacte non visible": "exactAreaNotVisible",
        "Qualité des matériaux non précisée": "materialQualityNotSpecified",
        "Niveau de finition non indiqué": "finishLevelNotIndicated",
        "Type de chauffage non précisé": "heatingTypeNotSpecified",
        "Configuration électrique non détaillée": "electricalConfigNotDetailed",
    }
)

INCONSISTENCIES = frozen_table(
    {
        "Aucune incohérence majeure détectée sur cette page d'élévations": (
            "noMajorOnElevations"
        ),
        "Plan montre seulement le sous-sol, manque les étages supérieurs pour "
        "estimation complète": "basementOnlyMissingFloors",
        "Aucune incohérence majeure détectée": "noMajorDetected",
        "Plan montre coupe mais dimensions complètes non visibles": (
            "sectionDimensionsNotVisible"
        ),
        "Dimensions incohérentes entre les plans": "dimensionsMismatch",
        "Superficie calculée ne correspond pas à la superficie indiquée": "areaMismatch",
        "Nombre de fenêtres différent entre élévations et plans": "windowCountMismatch",
    }
)

PREFIXES = CanonicalKeyResolver("budgetWarnings.prefixes.")
FULL_MESSAGES = CanonicalKeyResolver("budgetWarnings.full.", FULL_WARNINGS)
CONTENT_RESOLVERS = {
    "missingElement": CanonicalKeyResolver("budgetWarnings.missing.", MISSING_ELEMENTS),
    "ambiguity": CanonicalKeyResolver("budgetWarnings.ambiguities.", AMBIGUITIES),
    "inconsistency": CanonicalKeyResolver("budgetWarnings.inconsistencies.", INCONSISTENCIES),
}

MULTI_LOT_ANALYSIS_KEY = "budgetWarnings.multiLotAnalysis"
_MULTI_LOT_PATTERN = re.compile(
    r"Analyse multi-lots:\s*(\d+)\s*lot\(s\)\s*fusionnés pour\s*(\d+)\s*plan\(s\)\s*total\.",
    re.IGNORECASE,
)


def warning_kind(warning: str) -> str | None:
    """Return the prefix kind of `warning`, or `None` when it has no known prefix."""

    for prefix, kind in WARNING_PREFIXES:
        if warning.startswith(prefix):
            return kind
    return None


def translate_warning(t: TranslationFunction, warning: str) -> str:
    """Return `warning` for the catalog's display language.

    A known complete message is replaced as a whole. Otherwise the first
    prefix with a catalog entry is translated and the body after it is
    looked up by kind, keeping the received body when unknown. Warnings
    matching nothing are returned unchanged.
    """

    full = FULL_MESSAGES.lookup(t, warning)
    if full is not None:
        return full

    for prefix, kind in WARNING_PREFIXES:
        if not warning.startswith(prefix):
            continue
        translated_prefix = PREFIXES.lookup(t, kind)
        if translated_prefix is None:
            continue
        content = warning[len(prefix):].strip()
        return f"{translated_prefix} {_translate_content(t, content, kind)}"
    return warning


def translate_warnings(t: TranslationFunction, warnings: Iterable[str]) -> list[str]:
    """Translate each warning of `warnings`, keeping order."""

    return [translate_warning(t, warning) for warning in warnings]


def translate_recommendation(t: TranslationFunction, recommendation: str) -> str:
    """Return `recommendation` translated when it matches a known sentence pattern."""

    match = _MULTI_LOT_PATTERN.search(recommendation)
    if match is None:
        return recommendation
    translated = t(MULTI_LOT_ANALYSIS_KEY, lots=match.group(1), plans=match.group(2))
    if not isinstance(translated, str) or translated == MULTI_LOT_ANALYSIS_KEY:
        return recommendation
    return translated


def translate_recommendations(
    t: TranslationFunction, recommendations: Iterable[str]
) -> list[str]:
    """Translate each recommendation of `recommendations`, keeping order."""

    return [translate_recommendation(t, recommendation) for recommendation in recommendations]


def _translate_content(t: TranslationFunction, content: str, kind: str) -> str:
    resolver = CONTENT_RESOLVERS.get(kind)
    if resolver is None:
        return content
    return resolver.resolve(t, content)
