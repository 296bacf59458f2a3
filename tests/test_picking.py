# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for pagekit.picking.pick."""

from __future__ import annotations

from pagekit.picking import pick

OBJ = {"a": 1, "b": 2, "c": 3, "d": 4}


class TestPick:
    def test_named_keys(self):
        assert pick(["a", "c"], OBJ) == {"a": 1, "c": 3}

    def test_empty_inputs(self):
        assert pick([], OBJ) == {}
        assert pick(["a", "b"], {}) == {}

    def test_missing_keys_ignored(self):
        assert pick(["a", "e", "f"], OBJ) == {"a": 1}

    def test_falsy_values_kept(self):
        assert pick(["a", "b", "c"], {"a": 0, "b": False, "c": "", "d": None}) == {"a": 0, "b": False, "c": ""}
        assert pick(["b"], {"b": None}) == {"b": None}

    def test_duplicate_names(self):
        assert pick(["a", "a", "b"], OBJ) == {"a": 1, "b": 2}

    def test_returns_new_dict(self):
        original = dict(OBJ)
        result = pick(list(OBJ), OBJ)
        assert result == OBJ
        assert result is not OBJ
        assert OBJ == original

    def test_values_not_copied(self):
        nested = {"x": [1, 2]}
        assert pick(["x"], nested)["x"] is nested["x"]

    def test_curried(self):
        pick_ab = pick(["a", "b"])
        assert callable(pick_ab)
        assert pick_ab({"a": 1, "b": 2, "c": 3}) == {"a": 1, "b": 2}
        assert pick_ab({"a": 5, "d": 7}) == {"a": 5}

    def test_curried_with_generator_names(self):
        pick_ac = pick(name for name in "ac")
        assert pick_ac(OBJ) == {"a": 1, "c": 3}
        assert pick_ac(OBJ) == {"a": 1, "c": 3}
