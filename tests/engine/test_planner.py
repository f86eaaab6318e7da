from __future__ import annotations

import pytest

from modelsync.contracts.plan import IncompatibleMapping, ModelPlan, UpdateMode
from modelsync.engine.planner import apply_plan, check_mapping_compatibility, generate_update_plan, mapped_targets


def test_adds_newly_available_model() -> None:
    plan = generate_update_plan(["gpt-4"], ["gpt-4", "gpt-4o"], {}, UpdateMode.FULL)

    assert plan == ModelPlan(to_add=["gpt-4o"], to_remove=[])


def test_removes_alias_whose_target_disappeared() -> None:
    current = ["old-alias"]
    mapping = {"old-alias": "gpt-3.5"}

    plan = generate_update_plan(current, [], mapping, UpdateMode.FULL)

    assert plan == ModelPlan(to_add=[], to_remove=["old-alias"])
    assert check_mapping_compatibility(current, [], mapping) == [
        IncompatibleMapping(alias="old-alias", target="gpt-3.5", alias_available=False)
    ]


def test_alias_with_available_target_is_kept_and_target_not_added() -> None:
    plan = generate_update_plan(["fast"], ["gpt-4o-mini", "gpt-4o"], {"fast": "gpt-4o-mini"}, UpdateMode.FULL)

    assert plan.to_add == ["gpt-4o"]
    assert plan.to_remove == []


def test_alias_directly_available_is_kept_even_when_target_is_gone() -> None:
    current = ["claude-3"]
    available = ["claude-3"]
    mapping = {"claude-3": "claude-3-opus-20240229"}

    plan = generate_update_plan(current, available, mapping, UpdateMode.FULL)
    flagged = check_mapping_compatibility(current, available, mapping)

    assert plan.to_remove == []
    assert flagged == [IncompatibleMapping(alias="claude-3", target="claude-3-opus-20240229", alias_available=True)]


def test_unmapped_missing_model_is_removed_in_current_order() -> None:
    plan = generate_update_plan(["b", "a", "c"], ["c"], {}, UpdateMode.FULL)

    assert plan.to_remove == ["b", "a"]


def test_add_order_follows_available_and_skips_duplicates() -> None:
    plan = generate_update_plan([], ["z", "a", "z", "m"], {}, UpdateMode.ADD_ONLY)

    assert plan.to_add == ["z", "a", "m"]


def test_mapping_for_absent_alias_does_not_shadow_target() -> None:
    plan = generate_update_plan(["gpt-4"], ["gpt-4", "gpt-4o"], {"omni": "gpt-4o"}, UpdateMode.FULL)

    assert plan.to_add == ["gpt-4o"]


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (UpdateMode.ADD_ONLY, ModelPlan(to_add=["new"], to_remove=[])),
        (UpdateMode.REMOVE_ONLY, ModelPlan(to_add=[], to_remove=["gone"])),
        (UpdateMode.FULL, ModelPlan(to_add=["new"], to_remove=["gone"])),
    ],
)
def test_mode_gates_plan_halves(mode: UpdateMode, expected: ModelPlan) -> None:
    assert generate_update_plan(["kept", "gone"], ["kept", "new"], {}, mode) == expected


def test_empty_inputs_give_empty_lists() -> None:
    plan = generate_update_plan([], [], {}, UpdateMode.FULL)

    assert plan.to_add == []
    assert plan.to_remove == []
    assert plan.is_empty


@pytest.mark.parametrize(
    ("current", "available", "mapping"),
    [
        (["gpt-4"], ["gpt-4", "gpt-4o"], {}),
        (["old-alias", "x"], ["y"], {"old-alias": "gpt-3.5"}),
        (["fast", "slow", "legacy"], ["mini", "big", "slow"], {"fast": "mini", "legacy": "retired"}),
        (["a", "b"], ["b", "a", "c", "d"], {"b": "c"}),
        ([], ["m1", "m2"], {"alias": "m1"}),
    ],
)
def test_plan_invariants_and_fixed_point(current: list[str], available: list[str], mapping: dict[str, str]) -> None:
    for mode in UpdateMode:
        plan = generate_update_plan(current, available, mapping, mode)

        assert not set(plan.to_add) & set(current)
        assert set(plan.to_remove) <= set(current)

    plan = generate_update_plan(current, available, mapping, UpdateMode.FULL)
    updated = apply_plan(current, plan.to_add, plan.to_remove)

    assert generate_update_plan(updated, available, mapping, UpdateMode.FULL).is_empty


def test_mapped_targets_only_counts_aliases_in_use() -> None:
    assert mapped_targets(["a"], {"a": "x", "b": "y"}) == {"x"}


def test_apply_plan_keeps_current_order_and_appends_adds() -> None:
    assert apply_plan(["a", "b", "c"], ["d", "e"], ["b"]) == ["a", "c", "d", "e"]
