from __future__ import annotations

import math

# Durée fixe : 30 ans x 12 mois, quel que soit le type de dette
TERM_MONTHS = 360


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def monthly_payment(principal: float, annual_rate_percent: float) -> float:
    """
    Mensualité constante d'un prêt à taux fixe sur TERM_MONTHS périodes.
    P = L * r(1+r)^n / ((1+r)^n - 1)

    Pas de validation ici : les entrées négatives sont la responsabilité de l'appelant.
    """
    r = monthly_rate(annual_rate_percent)
    if r == 0:
        return principal / TERM_MONTHS

    try:
        growth = math.pow(1 + r, TERM_MONTHS)
    except OverflowError:
        growth = math.inf

    payment = principal * (r * growth) / (growth - 1) if math.isfinite(growth) else math.nan
    if not math.isfinite(payment):
        # taux démesuré : (1+r)^n domine, la mensualité tend vers les intérêts seuls
        return principal * r
    return payment


def monthly_income(value: float, annual_rate_percent: float) -> float:
    # rendement linéaire d'un actif (pas d'amortissement)
    return (value * (annual_rate_percent / 100)) / 12
