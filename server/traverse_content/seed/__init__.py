"""Seed routine for the tour catalogue."""

from .tours import FIRST_RUN_KEY, TourSeeder, seed_tours

__all__ = ["FIRST_RUN_KEY", "TourSeeder", "seed_tours"]
