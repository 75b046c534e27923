"""
Entity serialization and deserialization functions.

This module converts the persisted attribute set of an entity (level,
experience, stats, statuses, abilities, equipment) to and from plain
dictionaries and JSON files. Policies and transient battle flags are not
part of the persisted shape.
"""

import json
from pathlib import Path
from typing import Any

from battlesim.actions.ability import AbilityId
from battlesim.core.constants import Archetype, ControlMode, StatusKind
from battlesim.core.logging import log_error
from battlesim.effects.status_effect import StatusInstance

from .entity_stats import StatBlock
from .main import DEFAULT_EXP_REWARD, Entity


def entity_to_dict(entity: Entity) -> dict[str, Any]:
    """
    Serializes the persisted attribute set of an entity.

    Args:
        entity (Entity): The entity to serialize.

    Returns:
        dict[str, Any]: A JSON-compatible dictionary.

    """
    return {
        "name": entity.name,
        "level": entity.level,
        "control": entity.control.value,
        "archetype": entity.archetype.value,
        "exp": entity.exp,
        "exp_reward": entity.exp_reward,
        "stats": entity.stats.model_dump(),
        "statuses": {
            kind.value: instance.turns_remaining
            for kind, instance in entity.statuses.items()
        },
        "abilities": [ability_id.value for ability_id in entity.abilities],
        "equipment": dict(entity.equipment),
    }


def entity_from_dict(data: dict[str, Any]) -> Entity:
    """
    Creates an Entity instance from a dictionary of data.

    Args:
        data (dict[str, Any]): The dictionary containing entity data.

    Returns:
        Entity: The created Entity instance.

    Raises:
        ValueError: If a required key is missing or holds an unknown value.

    """
    try:
        entity = Entity(
            name=data["name"],
            stats=StatBlock.model_validate(data["stats"]),
            level=data.get("level", 1),
            control=ControlMode(data.get("control", ControlMode.POLICY.value)),
            archetype=Archetype(data.get("archetype", Archetype.MONSTER.value)),
            exp=data.get("exp", 0),
            exp_reward=data.get("exp_reward", DEFAULT_EXP_REWARD),
            abilities=[AbilityId(a) for a in data.get("abilities", [])],
            equipment=data.get("equipment"),
        )
    except KeyError as e:
        raise ValueError(f"Entity data is missing the key {e}") from e

    for kind_name, turns in data.get("statuses", {}).items():
        kind = StatusKind(kind_name)
        entity.statuses[kind] = StatusInstance(kind=kind, turns_remaining=turns)
    return entity


def load_entities(file_path: Path) -> dict[str, Entity]:
    """
    Loads entities from a JSON file holding a list of entity dictionaries.

    Args:
        file_path (Path): The path to the JSON file.

    Returns:
        dict[str, Entity]: Entities indexed by name. Empty if the file
        cannot be read.

    """
    entities: dict[str, Entity] = {}
    try:
        with open(file_path, encoding="utf-8") as f:
            entity_list = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        log_error(
            f"Failed to load entities from {file_path}: {e}",
            {"file_path": str(file_path), "context": "entity_file_loading"},
        )
        return entities

    if not isinstance(entity_list, list):
        log_error(
            f"Entity data in {file_path} is not a list.",
            {"file_path": str(file_path), "context": "entity_file_loading"},
        )
        return entities

    for entity_data in entity_list:
        entity = entity_from_dict(entity_data)
        entities[entity.name] = entity
    return entities


def save_entities(file_path: Path, entities: list[Entity]) -> None:
    """Writes the attribute set of the given entities to a JSON file."""
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump([entity_to_dict(e) for e in entities], f, indent=2)
