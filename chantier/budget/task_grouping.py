"""Grouping of budget items under construction-guide tasks.

Each budget category lists its guide tasks with keywords. An item belongs to
the first task whose keyword appears in its name; the rest land in
"Autres éléments". Task titles match the steps catalog so that
`translate_budget_task_title` can display them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from ..i18n.task_titles import OTHER_ITEMS_FR
from ..models.datatypes import BudgetItem, TaskKeywordMapping
from ..text.normalizer import normalize_key


def _tasks(*entries: tuple[str, tuple[str, ...]]) -> tuple[TaskKeywordMapping, ...]:
    return tuple(TaskKeywordMapping(task_title=title, keywords=keywords) for title, keywords in entries)


CATEGORY_TASK_MAPPINGS: Mapping[str, tuple[TaskKeywordMapping, ...]] = MappingProxyType(
    {
        "Excavation": _tasks(
            ("Implantation de la maison", ("implantation", "arpenteur", "piquets", "bornage")),
            (
                "Creusage et excavation",
                ("excavation", "creusage", "terre", "transport", "pelle", "nivellement"),
            ),
        ),
        "Fondation": _tasks(
            (
                "Coulage des fondations",
                (
                    "semelle", "mur", "fondation", "béton", "coffrage", "coulage",
                    "imperméabilisation", "membrane", "delta", "goudron",
                ),
            ),
            ("Drain et remblai", ("drain", "français", "remblai", "pierre", "gravier", "nette")),
        ),
        "Structure et charpente": _tasks(
            (
                "Plancher du rez-de-chaussée",
                ("solive", "plancher", "sous-plancher", "poutrelle", "rez-de-chaussée"),
            ),
            (
                "Érection des murs",
                ("mur", "colombage", "ossature", "2x4", "2x6", "linteau", "extérieur"),
            ),
            ("Structure de l'étage", ("étage", "deuxième", "2e")),
            ("Installation des fermes de toit", ("ferme", "toit", "chevron", "préfabriqué")),
            ("Pontage de toit", ("pontage", "contreplaqué", "osb")),
            ("Étanchéité", ("étanchéité", "typar", "tyvek", "pare-air")),
        ),
        "Toiture": _tasks(
            (
                "Membrane et bardeaux",
                (
                    "membrane", "bardeau", "asphalte", "solin", "fascia", "ventilation",
                    "toit", "toiture",
                ),
            ),
        ),
        "Fenêtres et portes extérieures": _tasks(
            ("Installation des fenêtres", ("fenêtre", "vitrage", "pvc", "aluminium")),
            ("Portes extérieures", ("porte", "entrée", "garage", "patio")),
        ),
        "Isolation et pare-vapeur": _tasks(
            (
                "Isolation des murs",
                ("isolation", "mur", "laine", "cellulose", "mousse", "r-24", "uréthane"),
            ),
            ("Isolation du toit/comble", ("comble", "grenier", "toit", "r-41", "plafond")),
            ("Pare-vapeur", ("pare-vapeur", "polyéthylène", "6 mil", "poly")),
            ("Fourrures de bois et fond de clouage", ("fourrure", "clouage", "bois")),
        ),
        "Plomberie sous dalle": _tasks(
            (
                "Plomberie sous dalle - première visite",
                ("plomberie", "drain", "tuyau", "sous-dalle", "égout"),
            ),
        ),
        "Coulage de dalle du sous-sol": _tasks(
            (
                "Préparation du sol",
                ("préparation", "nivellement", "compaction", "membrane", "isolant rigide"),
            ),
            (
                "Coulage du béton",
                ("dalle", "béton", "coulage", "joint", "cure", "sous-sol", "garage"),
            ),
        ),
        "Murs de division": _tasks(
            ("Construire escalier", ("escalier", "marche", "rampe", "garde-corps")),
            ("Ossature des murs", ("ossature", "mur", "division", "montant", "2x4", "2x6")),
            ("Cadrage des portes", ("cadrage", "cadre", "porte", "ouverture")),
        ),
        "Plomberie": _tasks(
            (
                "Plomberie brute",
                ("tuyau", "drain", "alimentation", "cuivre", "pex", "abs", "égout", "rough"),
            ),
            ("Chauffe-eau", ("chauffe-eau", "réservoir", "thermopompe")),
            ("Branchements municipaux", ("branchement", "aqueduc", "municipal", "raccord")),
            ("Robinetterie", ("robinet", "robinetterie")),
            ("Toilettes et lavabos", ("toilette", "lavabo", "évier", "vanité")),
            ("Douche et baignoire", ("douche", "bain", "baignoire")),
        ),
        "Électricité": _tasks(
            ("Entrée électrique", ("panneau", "disjoncteur", "ampérage", "200a", "hydro")),
            ("Filage brut", ("fil", "câble", "boîte", "électrique", "filage", "rough")),
            ("Inspection électrique", ("inspection", "certificat")),
            ("Prises et interrupteurs", ("prise", "interrupteur", "plaque")),
            ("Luminaires", ("luminaire", "plafonnier", "éclairage", "applique")),
            (
                "Raccordement des appareils",
                ("électroménager", "cuisinière", "sécheuse", "branchement"),
            ),
        ),
        "Chauffage et ventilation": _tasks(
            (
                "Système de chauffage",
                ("chauffage", "plinthe", "thermopompe", "radiant", "plancher chauffant"),
            ),
            (
                "Ventilateur récupérateur de chaleur (VRC) (échangeur d'air)",
                ("vrc", "échangeur", "récupérateur", "air"),
            ),
            (
                "Conduits de ventilation",
                ("conduit", "ventilation", "hotte", "sécheuse", "salle de bain"),
            ),
        ),
        "Revêtement extérieur": _tasks(
            (
                "Revêtement extérieur",
                (
                    "revêtement", "vinyle", "brique", "pierre", "bois", "canexel", "crépi",
                    "parement", "fibrociment",
                ),
            ),
            ("Fascia et soffite", ("fascia", "soffite", "corniche", "bordure")),
            ("Balcons et terrasses", ("balcon", "terrasse", "galerie")),
            (
                "Aménagement paysager",
                ("aménagement", "paysager", "gazon", "entrée", "pavé", "plantation"),
            ),
        ),
        "Gypse et peinture": _tasks(
            ("Pose du gypse", ("gypse", "placo", "plâtre", "drywall", "panneau")),
            ("Tirage de joints", ("joint", "tirage", "ruban", "composé")),
            ("Peinture", ("peinture", "peintre", "apprêt", "primer", "couche")),
        ),
        "Revêtements de sol": _tasks(
            (
                "Plancher de bois ou stratifié",
                ("plancher", "bois franc", "flottant", "stratifié", "laminé"),
            ),
            ("Céramique", ("céramique", "tuile", "carrelage", "porcelaine", "mosaïque")),
        ),
        "Travaux ébénisterie": _tasks(
            (
                "Armoires de cuisine et vanités",
                ("armoire", "cuisine", "vanité", "cabinet", "meuble-lavabo"),
            ),
            ("Comptoirs", ("comptoir", "îlot", "quartz", "granit")),
        ),
        "Finitions intérieures": _tasks(
            ("Portes intérieures", ("porte", "intérieure", "poignée", "serrure")),
            ("Moulures et plinthes", ("moulure", "plinthe", "cadrage", "couronne", "corniche")),
            ("Escalier", ("escalier", "marche", "contremarche", "rampe")),
            ("Peinture de finition", ("peinture finition", "retouche", "couche finale")),
        ),
    }
)


def get_tasks_for_category(category_name: str) -> list[str]:
    """Return the task titles defined for a category, or an empty list."""

    return [mapping.task_title for mapping in CATEGORY_TASK_MAPPINGS.get(category_name, ())]


def match_task(category_name: str, item_name: str) -> str | None:
    """Return the first task title whose keyword appears in `item_name`."""

    normalized_name = normalize_key(item_name)
    for mapping in CATEGORY_TASK_MAPPINGS.get(category_name, ()):
        if any(normalize_key(keyword) in normalized_name for keyword in mapping.keywords):
            return mapping.task_title
    return None


def group_items_by_task(
    category_name: str, items: Iterable[BudgetItem]
) -> dict[str, list[BudgetItem]]:
    """Group items under the category's task titles.

    Groups follow task order, then "Autres éléments" for unmatched items.
    Empty groups are omitted.
    """

    grouped: dict[str, list[BudgetItem]] = {
        title: [] for title in get_tasks_for_category(category_name)
    }
    other_items: list[BudgetItem] = []

    for item in items:
        task_title = match_task(category_name, item.name)
        if task_title is None:
            other_items.append(item)
        else:
            grouped[task_title].append(item)

    if other_items:
        grouped[OTHER_ITEMS_FR] = other_items
    return {title: group for title, group in grouped.items() if group}
