"""Display labels for canonical categories, trades, plan tiers, and steps.

Budget categories, trade ids, plan names, and step ids are stored in French;
these helpers return what the UI should show in the catalog's language.
"""

from __future__ import annotations

from typing import Sequence

from .catalog import TranslationFunction
from .resolver import CanonicalKeyResolver, frozen_table

CATEGORY_KEY_BY_FR_NAME = frozen_table(
    {
        "Excavation": "excavation",
        "Fondation": "foundation",
        "Structure et charpente": "structure",
        "Toiture": "roofing",
        "Fenêtres et portes extérieures": "windowsDoors",
        "Isolation et pare-vapeur": "insulation",
        "Plomberie sous dalle": "plumbingSlab",
        "Coulage de dalle du sous-sol": "basementSlab",
        "Coulée de dalle du sous-sol": "basementSlab",
        "Murs de division": "interiorWalls",
        "Plomberie": "plumbing",
        "Électricité": "electrical",
        "Chauffage et ventilation": "hvac",
        "Revêtement extérieur": "exterior",
        "Gypse et peinture": "drywall",
        "Revêtements de sol": "flooring",
        "Travaux ébénisterie": "cabinetry",
        "Finitions intérieures": "interiorFinishes",
        "Autres éléments": "otherItems",
        "Budget imprévu (5%)": "contingency",
        "Taxes": "taxes",
    }
)

TRADE_KEY_BY_ID = frozen_table(
    {
        "excavation": "excavation",
        "fondation": "foundation",
        "charpente": "carpenter",
        "toiture": "roofer",
        "fenetre": "windowsDoors",
        "electricite": "electrician",
        "plomberie": "plumber",
        "hvac": "hvac",
        "isolation": "insulation",
        "gypse": "drywall",
        "peinture": "painter",
        "plancher": "flooring",
        "ceramique": "tiler",
        "armoires": "cabinetMaker",
        "comptoirs": "countertops",
        "finitions": "interiorFinish",
        "exterieur": "exteriorSiding",
        "amenagement": "landscaping",
        "inspecteur": "inspector",
        "arpenteur": "surveyor",
        "entrepreneur-general": "generalContractor",
        "autre": "other",
        "beton": "concrete",
    }
)

PLAN_TIER_KEY_BY_NAME = frozen_table(
    {
        "Découverte": "decouverte",
        "Essentiel": "essentiel",
        "Gestion complète": "gestionComplete",
    }
)

CATEGORY_LABELS = CanonicalKeyResolver(prefix="categories.", keys=CATEGORY_KEY_BY_FR_NAME)
TRADE_LABELS = CanonicalKeyResolver(prefix="schedule.trades.", keys=TRADE_KEY_BY_ID)
PLAN_NAMES = CanonicalKeyResolver(
    prefix="plans.tiers.", keys=PLAN_TIER_KEY_BY_NAME, suffix=".name"
)
PLAN_DESCRIPTIONS = CanonicalKeyResolver(
    prefix="plans.tiers.", keys=PLAN_TIER_KEY_BY_NAME, suffix=".description"
)
PLAN_FEATURES = CanonicalKeyResolver(
    prefix="plans.tiers.", keys=PLAN_TIER_KEY_BY_NAME, suffix=".features"
)
STEP_NAMES = CanonicalKeyResolver(prefix="steps.", suffix=".title")


def get_category_label(t: TranslationFunction, name: str) -> str:
    """Return the display label of a canonical budget category name."""

    return CATEGORY_LABELS.resolve(t, name)


def get_translated_trade_name(t: TranslationFunction, trade_id: str) -> str:
    """Return the display label of an internal trade id."""

    return TRADE_LABELS.resolve(t, trade_id)


def get_plan_tier_key(plan_name: str) -> str | None:
    """Return the tier key for a plan name stored in the database."""

    return PLAN_TIER_KEY_BY_NAME.get(plan_name)


def get_translated_plan_name(t: TranslationFunction, plan_name: str) -> str:
    """Return the display name of a plan tier, or `plan_name` when unknown."""

    return PLAN_NAMES.resolve(t, plan_name)


def get_translated_plan_description(
    t: TranslationFunction, plan_name: str, fallback: str | None
) -> str:
    """Return the translated tier description.

    Unknown tiers and missing entries fall back to the stored description,
    and to an empty string when none was stored.
    """

    return PLAN_DESCRIPTIONS.resolve(t, plan_name, fallback=fallback or "")


def get_translated_plan_features(
    t: TranslationFunction, plan_name: str, fallback_features: Sequence[str]
) -> list[str]:
    """Return translated tier features, or the fallback list unchanged."""

    return PLAN_FEATURES.resolve_list(t, plan_name, fallback_features)


def get_translated_step_name(
    t: TranslationFunction, step_id: str, fallback_name: str | None = None
) -> str:
    """Return the display name of a guide step.

    Falls back to `fallback_name` (usually the stored step name), then to a
    label built from the id itself: `dalle-sous-sol` becomes `Dalle sous sol`.
    """

    translated = STEP_NAMES.lookup(t, step_id)
    if translated is not None:
        return translated
    if fallback_name:
        return fallback_name
    return humanize_identifier(step_id)


def humanize_identifier(identifier: str) -> str:
    """Capitalize the first character and turn hyphens into spaces."""

    if not isinstance(identifier, str) or not identifier:
        return ""
    return identifier[:1].upper() + identifier[1:].replace("-", " ")
