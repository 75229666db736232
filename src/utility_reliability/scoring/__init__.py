# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring engine, recency weights, and rating thresholds.

Must not import the engine: ``utility_reliability.config`` reads the
weight constants from this package.
"""
