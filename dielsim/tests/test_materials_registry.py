# -*- coding: utf-8 -*-
"""
Built-in sample table and registry behaviour.
"""
import math

import pytest

from dielsim.materials.database import (
    MaterialRegistry,
    MaterialSpec,
    NO_CURIE_POINT,
    default_registry,
    get_material,
    list_materials,
)


def test_builtin_samples_in_menu_order():
    assert list_materials() == ["Barium Titanate", "Quartz", "Titanium Dioxide"]


def test_builtin_values():
    bt = get_material("Barium Titanate")
    assert (bt.area_mm2, bt.thickness_mm, bt.curie_temp_C) == (48.0, 1.42, 120.0)
    assert bt.is_ferroelectric
    assert math.isclose(bt.side_mm, math.sqrt(48.0))
    assert get_material("Titanium Dioxide").curie_temp_C == 50.0
    q = get_material("Quartz")
    assert q.curie_temp_C == NO_CURIE_POINT
    assert not q.is_ferroelectric


def test_lookup_by_menu_index():
    reg = default_registry()
    assert len(reg) == 3
    assert reg.by_index(1).name == "Barium Titanate"
    assert reg.by_index(3).name == "Titanium Dioxide"
    for bad in (0, 4, -1):
        with pytest.raises(IndexError):
            reg.by_index(bad)


def test_unknown_name():
    with pytest.raises(KeyError):
        get_material("Unobtainium")
    assert "Unobtainium" not in default_registry()


def test_specs_are_immutable():
    with pytest.raises(AttributeError):
        get_material("Quartz").curie_temp_C = 573.0


def test_with_materials_returns_new_registry():
    base = default_registry()
    extra = MaterialSpec("Lead Titanate", 48.0, 1.0, 490.0)
    override = MaterialSpec("Quartz", 10.0, 0.5)
    reg = base.with_materials([extra, override])
    assert reg.names() == ["Barium Titanate", "Lead Titanate", "Quartz", "Titanium Dioxide"]
    assert reg.get("Quartz").area_mm2 == 10.0
    # the built-in table is untouched
    assert "Lead Titanate" not in base
    assert base.get("Quartz").area_mm2 == 48.0
