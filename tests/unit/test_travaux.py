"""Unit tests for devis.domain.calculator.travaux module."""

import itertools
import math

import pytest

from devis.domain.calculator.travaux import (
    calculate_line_total_ht,
    calculate_line_total_ttc,
    calculate_line_vat,
    calculate_total_fournitures,
    calculate_total_ht,
    calculate_total_main_oeuvre,
    calculate_total_ttc,
    calculate_total_vat,
    calculate_travaux_totals,
    calculate_unit_price_ht,
    filter_travaux_by_piece,
    group_by_vat_rate,
    summarize_by_vat_rate,
)
from devis.domain.models import Travail


class TestLineAmounts:
    """Tests for per-line calculations."""

    def test_unit_price_not_rounded(self):
        t = Travail(piece_id="r", prix_fournitures=12.345, prix_main_oeuvre=0.001)
        assert calculate_unit_price_ht(t) == 12.345 + 0.001

    def test_line_amounts(self):
        t = Travail(piece_id="r", quantite=2, prix_fournitures=50.0, prix_main_oeuvre=50.0, taux_tva=20.0)
        assert calculate_line_total_ht(t) == 200.0
        assert calculate_line_vat(t) == 40.0
        assert calculate_line_total_ttc(t) == 240.0

    def test_line_amounts_rounded(self):
        """3 × 1.111 = 3.333 HT, 5.5 % VAT = 0.18315."""
        t = Travail(piece_id="r", quantite=3, prix_fournitures=1.111, taux_tva=5.5)
        assert calculate_line_total_ht(t) == 3.33
        assert calculate_line_vat(t) == 0.18
        assert calculate_line_total_ttc(t) == 3.51

    def test_zero_vat(self):
        t = Travail(piece_id="r", quantite=1, prix_main_oeuvre=80.0, taux_tva=0.0)
        assert calculate_line_vat(t) == 0.0
        assert calculate_line_total_ttc(t) == 80.0

    def test_nan_propagates(self):
        """Malformed quantities are not validated."""
        t = Travail(piece_id="r", quantite=float("nan"), prix_fournitures=10.0)
        assert math.isnan(calculate_line_total_ht(t))
        assert math.isnan(calculate_line_total_ttc(t))


class TestTotals:
    """Tests for list aggregates."""

    def test_grand_totals(self, sample_travaux):
        assert calculate_total_ht(sample_travaux) == 350.0
        assert calculate_total_vat(sample_travaux) == 55.0
        assert calculate_total_ttc(sample_travaux) == 405.0

    def test_supply_and_labour_split(self, sample_travaux):
        assert calculate_total_fournitures(sample_travaux) == 180.0
        assert calculate_total_main_oeuvre(sample_travaux) == 170.0

    def test_empty_list(self):
        assert calculate_total_ht([]) == 0.0
        assert calculate_total_vat([]) == 0.0
        assert calculate_total_ttc([]) == 0.0

    def test_order_independent(self):
        """Totals do not depend on the order of the work items."""
        travaux = [
            Travail(piece_id="r", quantite=3.7, prix_fournitures=12.99, prix_main_oeuvre=7.31, taux_tva=10.0),
            Travail(piece_id="r", quantite=1, prix_fournitures=0.1, prix_main_oeuvre=0.2, taux_tva=20.0),
            Travail(piece_id="r", quantite=14.25, prix_fournitures=3.33, prix_main_oeuvre=21.07, taux_tva=5.5),
            Travail(piece_id="r", quantite=2, prix_fournitures=1999.99, prix_main_oeuvre=0.0, taux_tva=20.0),
        ]
        reference = (calculate_total_ht(travaux), calculate_total_vat(travaux), calculate_total_ttc(travaux))
        for perm in itertools.permutations(travaux):
            totals = (calculate_total_ht(perm), calculate_total_vat(perm), calculate_total_ttc(perm))
            for value, expected in zip(totals, reference):
                assert value == pytest.approx(expected, rel=1e-9)

    def test_filter_by_piece(self, sample_travaux):
        salon = filter_travaux_by_piece(sample_travaux, "room-salon")
        assert [t.id for t in salon] == ["t-peinture", "t-electricite"]
        assert filter_travaux_by_piece(sample_travaux, "unknown") == []


class TestVatGrouping:
    """Tests for VAT rate grouping."""

    def test_group_by_exact_rate(self, sample_travaux):
        groups = group_by_vat_rate(sample_travaux)
        assert list(groups) == [10.0, 20.0]
        assert [t.id for t in groups[10.0]] == ["t-peinture", "t-plinthes"]
        assert [t.id for t in groups[20.0]] == ["t-electricite"]

    def test_rates_not_bucketed(self):
        travaux = [
            Travail(piece_id="r", taux_tva=5.5),
            Travail(piece_id="r", taux_tva=5.50001),
        ]
        assert len(group_by_vat_rate(travaux)) == 2

    def test_group_order_follows_first_appearance(self, sample_travaux):
        reordered = [sample_travaux[2], sample_travaux[0], sample_travaux[1]]
        assert list(group_by_vat_rate(reordered)) == [20.0, 10.0]

    def test_summary(self, sample_travaux):
        summary = summarize_by_vat_rate(sample_travaux)
        assert [g.taux_tva for g in summary] == [10.0, 20.0]
        assert (summary[0].count, summary[0].total_ht, summary[0].total_tva) == (2, 150.0, 15.0)
        assert (summary[1].count, summary[1].total_ht, summary[1].total_tva) == (1, 200.0, 40.0)
        assert summary[0].total_ttc == 165.0
        assert summary[1].total_ttc == 240.0

    def test_summary_sorted_by_rate(self, sample_travaux):
        reordered = [sample_travaux[2], sample_travaux[0], sample_travaux[1]]
        assert [g.taux_tva for g in summarize_by_vat_rate(reordered)] == [10.0, 20.0]

    def test_travaux_totals(self, sample_travaux):
        totals = calculate_travaux_totals(sample_travaux)
        assert (totals.total_ht, totals.total_tva, totals.total_ttc) == (350.0, 55.0, 405.0)
        assert len(totals.groupes_tva) == 2
