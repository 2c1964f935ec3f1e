"""Work item financial calculations.

Rounding checkpoints: the unit price is kept at full precision, every line
amount (HT, VAT, TTC) is rounded with `round2`, and aggregates are the
`round2` of the sum of rounded lines. Sums are therefore independent of
the order of the work items.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from devis.core.numbers import round2
from devis.domain.models.totals import TravauxTotals, VatGroupTotals
from devis.domain.models.travail import Travail


def calculate_unit_price_ht(travail: Travail) -> float:
    """Pre-tax price of one unit: supplies + labour (not rounded)."""
    return travail.prix_fournitures + travail.prix_main_oeuvre


def calculate_line_total_ht(travail: Travail) -> float:
    """Pre-tax amount of the line."""
    return round2(calculate_unit_price_ht(travail) * travail.quantite)


def calculate_line_vat(travail: Travail) -> float:
    """VAT amount of the line."""
    return round2(calculate_line_total_ht(travail) * travail.taux_tva / 100)


def calculate_line_total_ttc(travail: Travail) -> float:
    """Tax-inclusive amount of the line."""
    return round2(calculate_line_total_ht(travail) + calculate_line_vat(travail))


def calculate_total_ht(travaux: Iterable[Travail]) -> float:
    """Pre-tax total of a list of work items."""
    return round2(sum(calculate_line_total_ht(t) for t in travaux))


def calculate_total_vat(travaux: Iterable[Travail]) -> float:
    """VAT total of a list of work items."""
    return round2(sum(calculate_line_vat(t) for t in travaux))


def calculate_total_ttc(travaux: Iterable[Travail]) -> float:
    """Tax-inclusive total of a list of work items."""
    return round2(sum(calculate_line_total_ttc(t) for t in travaux))


def calculate_total_fournitures(travaux: Iterable[Travail]) -> float:
    """Supply share of the pre-tax total."""
    return round2(sum(t.prix_fournitures * t.quantite for t in travaux))


def calculate_total_main_oeuvre(travaux: Iterable[Travail]) -> float:
    """Labour share of the pre-tax total."""
    return round2(sum(t.prix_main_oeuvre * t.quantite for t in travaux))


def filter_travaux_by_piece(travaux: Iterable[Travail], piece_id: str) -> list[Travail]:
    """Work items belonging to one room, in their original order."""
    return [t for t in travaux if t.piece_id == piece_id]


def group_by_vat_rate(travaux: Iterable[Travail]) -> dict[float, list[Travail]]:
    """Partition work items by their exact VAT rate.

    Rates are not bucketed: 5.5 and 5.50001 are two groups. Groups appear in
    the order their rate is first met.
    """
    groups: dict[float, list[Travail]] = {}
    for travail in travaux:
        groups.setdefault(travail.taux_tva, []).append(travail)
    return groups


def summarize_by_vat_rate(travaux: Iterable[Travail]) -> list[VatGroupTotals]:
    """Totals per VAT rate, sorted by rate.

    Args:
        travaux: Work items to summarize

    Returns:
        One VatGroupTotals per distinct rate
    """
    summaries = [
        VatGroupTotals(
            taux_tva=rate,
            count=len(items),
            total_ht=calculate_total_ht(items),
            total_tva=calculate_total_vat(items),
            total_ttc=calculate_total_ttc(items),
        )
        for rate, items in group_by_vat_rate(travaux).items()
    ]
    return sorted(summaries, key=lambda g: g.taux_tva)


def calculate_travaux_totals(travaux: Sequence[Travail]) -> TravauxTotals:
    """Full financial aggregate of a room or a project.

    Args:
        travaux: Work items to aggregate

    Returns:
        TravauxTotals with grand totals and VAT groups
    """
    return TravauxTotals(
        total_ht=calculate_total_ht(travaux),
        total_tva=calculate_total_vat(travaux),
        total_ttc=calculate_total_ttc(travaux),
        total_fournitures=calculate_total_fournitures(travaux),
        total_main_oeuvre=calculate_total_main_oeuvre(travaux),
        groupes_tva=summarize_by_vat_rate(travaux),
    )
