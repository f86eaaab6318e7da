"""Update plan generation and mapping compatibility checks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from modelsync.contracts.plan import IncompatibleMapping, ModelPlan, UpdateMode


def mapped_targets(current_models: Sequence[str], mapping: Mapping[str, str]) -> set[str]:
    """Canonical names already covered by an alias present in *current_models*."""
    current = set(current_models)
    return {target for alias, target in mapping.items() if alias in current}


def generate_update_plan(
    current_models: Sequence[str],
    available_models: Sequence[str],
    mapping: Mapping[str, str],
    mode: UpdateMode = UpdateMode.FULL,
) -> ModelPlan:
    """Compute the add/remove diff of one channel against its available models.

    An alias stays live while its canonical target is available; every other
    identifier stays live only while it is itself available.
    """
    current = set(current_models)
    available = set(available_models)
    covered = mapped_targets(current_models, mapping)
    plan = ModelPlan()

    if mode.adds:
        proposed: set[str] = set()
        for model in available_models:
            if model in current or model in covered or model in proposed:
                continue
            proposed.add(model)
            plan.to_add.append(model)

    if mode.removes:
        for model in current_models:
            if model in mapping:
                # An alias whose name is itself directly available is kept.
                stale = mapping[model] not in available and model not in available
            else:
                stale = model not in available
            if stale and model not in plan.to_remove:
                plan.to_remove.append(model)

    return plan


def check_mapping_compatibility(
    current_models: Sequence[str],
    available_models: Sequence[str],
    mapping: Mapping[str, str],
) -> list[IncompatibleMapping]:
    """Flag aliases in use whose canonical target is no longer available."""
    current = set(current_models)
    available = set(available_models)
    return [
        IncompatibleMapping(alias=alias, target=target, alias_available=alias in available)
        for alias, target in mapping.items()
        if alias in current and target not in available
    ]


def apply_plan(current_models: Sequence[str], adds: Sequence[str], removes: Sequence[str]) -> list[str]:
    """Build the replacement list: current minus removals, then additions appended."""
    dropped = set(removes)
    kept = [model for model in current_models if model not in dropped]
    present = set(kept)
    return kept + [model for model in adds if model not in present]
