"""French to English rendering of free-form budget item names.

Item names come from plan analysis and submissions in French. In French
locales they are shown verbatim; otherwise known construction terms are
replaced word by word while dimensions and specifications are preserved.
"""

from __future__ import annotations

import re

from .catalog import TranslationFunction
from .resolver import frozen_table

FRENCH_LOCALES = frozenset({"fr", "fr-CA"})

TERM_TRANSLATIONS = frozen_table(
    {
        # Structure
        "solives": "joists",
        "solive": "joist",
        "fermes": "trusses",
        "ferme": "truss",
        "poutre": "beam",
        "poutres": "beams",
        "chevrons": "rafters",
        "chevron": "rafter",
        "colombages": "studs",
        "colombage": "stud",
        "montants": "studs",
        "montant": "stud",
        "lisse": "plate",
        "lisses": "plates",
        "sablière": "top plate",
        "sablières": "top plates",
        "charpente": "framing",
        "ossature": "frame",
        "pontage": "sheathing",
        "contreplaqué": "plywood",
        "osb": "OSB",
        # Levels
        "plafond": "ceiling",
        "plancher": "floor",
        "rez-de-chaussée": "main floor",
        "sous-sol": "basement",
        "étage": "floor",
        "comble": "attic",
        "entretoit": "attic",
        "toiture": "roof",
        "toit": "roof",
        # Walls
        "mur": "wall",
        "murs": "walls",
        "murale": "wall",
        "cloison": "partition",
        "cloisons": "partitions",
        "division": "partition",
        "extérieur": "exterior",
        "extérieurs": "exterior",
        "intérieur": "interior",
        "intérieurs": "interior",
        "érection": "erection",
        # Foundation
        "fondation": "foundation",
        "fondations": "foundations",
        "semelle": "footing",
        "semelles": "footings",
        "dalle": "slab",
        "béton": "concrete",
        "coffrage": "formwork",
        "armature": "rebar",
        "remblai": "backfill",
        "excavation": "excavation",
        "creusage": "digging",
        "drain": "drain",
        "imperméabilisation": "waterproofing",
        "monolithique": "monolithic",
        "pouces": "inches",
        "pouce": "inch",
        "bords épaissis": "thickened edges",
        "bord épaissi": "thickened edge",
        # Insulation
        "isolation": "insulation",
        "isolant": "insulation",
        "isolée": "insulated",
        "isolé": "insulated",
        "pare-vapeur": "vapour barrier",
        "pare-air": "air barrier",
        "cellulose": "cellulose",
        "soufflée": "blown",
        "soufflé": "blown",
        "laine": "wool",
        "polyuréthane": "polyurethane",
        "giclé": "spray foam",
        "uréthane": "urethane",
        "fourrure": "furring",
        "fourrures": "furring strips",
        "rigide": "rigid",
        "polystyrène": "polystyrene",
        # Plumbing
        "plomberie": "plumbing",
        "tuyauterie": "piping",
        "conduite": "pipe",
        "conduites": "pipes",
        "robinetterie": "faucets",
        "robinet": "faucet",
        "toilette": "toilet",
        "lavabo": "sink",
        "douche": "shower",
        "baignoire": "bathtub",
        "chauffe-eau": "water heater",
        "réservoir": "tank",
        "puisard": "sump",
        "raccordements": "connections",
        "raccordement": "connection",
        # Electrical
        "électricité": "electrical",
        "électrique": "electric",
        "électriques": "electric",
        "filage": "wiring",
        "câblage": "wiring",
        "panneau": "panel",
        "prise": "outlet",
        "prises": "outlets",
        "interrupteur": "switch",
        "interrupteurs": "switches",
        "luminaire": "light fixture",
        "luminaires": "light fixtures",
        "entrée électrique": "electrical service entry",
        "circuits": "circuits",
        "circuit": "circuit",
        # HVAC
        "chauffage": "heating",
        "ventilation": "ventilation",
        "climatisation": "air conditioning",
        "conduit": "duct",
        "conduits": "ducts",
        "échangeur": "exchanger",
        "thermopompe": "heat pump",
        "plinthe": "baseboard",
        "plinthes": "baseboards",
        "vrc": "HRV",
        "récupérateur": "recovery unit",
        # Exterior
        "revêtement": "cladding",
        "bardeau": "shingle",
        "bardeaux": "shingles",
        "membrane": "membrane",
        "fascia": "fascia",
        "fascias": "fascias",
        "soffite": "soffit",
        "soffites": "soffits",
        "gouttière": "gutter",
        "gouttières": "gutters",
        "balcon": "balcony",
        "terrasse": "deck",
        "fenêtre": "window",
        "fenêtres": "windows",
        "porte": "door",
        "portes": "doors",
        "fibres-ciment": "fiber-cement",
        "fibre-ciment": "fiber-cement",
        # Doors and windows
        "garage": "garage",
        "d'entrée": "entry",
        "entrée": "entry",
        "piétonne": "pedestrian",
        "piétonnier": "pedestrian",
        "ouvre-porte": "door opener",
        "ouvre": "opener",
        "double": "double",
        "simple": "single",
        "acier": "steel",
        # Finishes
        "gypse": "drywall",
        "gyproc": "drywall",
        "tirage de joints": "taping and mudding",
        "joints": "joints",
        "peinture": "paint",
        "céramique": "ceramic tile",
        "plancher flottant": "floating floor",
        "stratifié": "laminate",
        "bois franc": "hardwood",
        "moulure": "trim",
        "moulures": "trim",
        "cadrage": "casing",
        "escalier": "staircase",
        # Cabinetry
        "armoire": "cabinet",
        "armoires": "cabinets",
        "cuisine": "kitchen",
        "vanité": "vanity",
        "vanités": "vanities",
        "comptoir": "countertop",
        "comptoirs": "countertops",
        # Materials
        "bois": "wood",
        "aluminium": "aluminum",
        "pvc": "PVC",
        "vinyle": "vinyl",
        "pierre": "stone",
        "granit": "granite",
        "quartz": "quartz",
        # Common
        "estimé": "Estimated",
        "estimation": "estimate",
        "installation": "installation",
        "pose": "installation",
        "main-d'œuvre": "labor",
        "main d'œuvre": "labor",
        "matériaux": "materials",
        "fournitures": "supplies",
        "aucun élément": "No items",
        "aucun item": "No items",
        "structure": "structure",
        "finition": "finishing",
        "selon notes client": "per client notes",
        "selon notes": "per notes",
        # Connectors
        "de": "of",
        "du": "of the",
        "des": "of the",
        "et": "and",
        "avec": "with",
        "sous": "under",
        "sur": "on",
        # Dimensions
        "c/c": "o.c.",
        "p.c.": "o.c.",
        "pi²": "sq ft",
        "pieds carrés": "square feet",
        "pied carré": "square foot",
        "pi.lin.": "lin.ft.",
        "pied linéaire": "linear foot",
        "pieds linéaires": "linear feet",
    }
)

NO_ITEMS_MESSAGES = frozen_table(
    {
        "aucun élément associé": "No items associated",
        "aucun item associé": "No items associated",
        "aucun élément détecté": "No items detected",
        "aucun item détecté": "No items detected",
        "non associé": "Not associated",
    }
)


def _compile_term_patterns() -> tuple[tuple[re.Pattern[str], str], ...]:
    """Compile whole-word patterns, longest French term first."""

    ordered = sorted(TERM_TRANSLATIONS.items(), key=lambda entry: len(entry[0]), reverse=True)
    return tuple(
        (re.compile(rf"(?<!\w){re.escape(french)}(?!\w)", re.IGNORECASE), english)
        for french, english in ordered
    )


_TERM_PATTERNS = _compile_term_patterns()


def is_french_locale(t: TranslationFunction) -> bool:
    """Return whether the catalog behind `t` displays French."""

    return t("common.locale") in FRENCH_LOCALES


def translate_budget_item_name(t: TranslationFunction, item_name: str) -> str:
    """Return `item_name` rendered for the catalog's display language."""

    if not item_name or is_french_locale(t):
        return item_name

    translated = item_name
    for pattern, english in _TERM_PATTERNS:
        translated = pattern.sub(lambda match: _match_case(match.group(0), english), translated)
    return translated


def translate_no_items_message(t: TranslationFunction, message: str) -> str:
    """Return an English empty-state message for known French phrasings."""

    if is_french_locale(t):
        return message

    lowered = message.lower().strip()
    for french, english in NO_ITEMS_MESSAGES.items():
        if french in lowered:
            return english
    return message


def _match_case(source: str, replacement: str) -> str:
    if source[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement
