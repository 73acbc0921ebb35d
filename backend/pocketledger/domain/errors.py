from __future__ import annotations


class ValidationError(ValueError):
    """
    Donnée d'entrée refusée (champ requis absent, montant invalide, etc.).
    Levée par les factories du domain, absorbée par les services (refus silencieux).
    """
