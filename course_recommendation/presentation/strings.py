"""
Localized strings for the recommendation block.

Unknown languages fall back to DEFAULT_LANG, then to English.
"""

from typing import Dict, Optional

from ..config import DEFAULT_LANG

STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "pluginname": "Course recommendations",
        "recommended_courses": "Recommended courses",
        "no_recommendations": "No course recommendations available at this time.",
        "login_required": "Please log in to see course recommendations.",
    },
    "es": {
        "pluginname": "Recomendaciones de cursos",
        "recommended_courses": "Cursos recomendados",
        "no_recommendations": "No hay recomendaciones de cursos disponibles en este momento.",
        "login_required": "Inicia sesión para ver recomendaciones de cursos.",
    },
    "fr": {
        "pluginname": "Recommandations de cours",
        "recommended_courses": "Cours recommandés",
        "no_recommendations": "Aucune recommandation de cours disponible pour le moment.",
        "login_required": "Veuillez vous connecter pour voir les recommandations de cours.",
    },
}


def _normalize_lang(lang: Optional[str]) -> str:
    # "es_mx", "es-MX" -> "es"
    if not lang:
        return ""
    return lang.replace("-", "_").split("_", 1)[0].lower()


def get_string(key: str, lang: Optional[str] = None) -> str:
    """
    Return the string `key` in `lang`.

    Raises:
        KeyError: if `key` is not a known string identifier
    """
    if key not in STRINGS["en"]:
        raise KeyError(f"Unknown string identifier: {key}")

    for candidate in (_normalize_lang(lang), _normalize_lang(DEFAULT_LANG), "en"):
        table = STRINGS.get(candidate)
        if table and key in table:
            return table[key]
    return STRINGS["en"][key]
