"""
ABI Loader - Loads contract artifacts shipped with the package.

Artifacts live in lukup/chain/artifacts/<Name>.json and carry the contract
interface ("abi") plus known deployment addresses per chain id ("networks").
They are treated as read-only configuration and validated once on load.
"""

from __future__ import annotations

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import jsonschema

from ..config import get_setting
from ..errors import ConfigError

ARTIFACTS_DIR = Path(__file__).resolve().parent / "artifacts"

_PARAM_SCHEMA = {
    "type": "object",
    "required": ["name", "type"],
    "properties": {
        "name": {"type": "string"},
        "type": {"type": "string"},
    },
}

ARTIFACT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["abi", "networks"],
    "properties": {
        "contractName": {"type": "string"},
        "version": {"type": "string"},
        "abi": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["type"],
                "properties": {
                    "type": {"enum": ["function", "constructor", "event", "error", "fallback", "receive"]},
                    "name": {"type": "string"},
                    "inputs": {"type": "array", "items": _PARAM_SCHEMA},
                    "outputs": {"type": "array", "items": _PARAM_SCHEMA},
                    "stateMutability": {"enum": ["pure", "view", "nonpayable", "payable"]},
                },
            },
        },
        "networks": {
            "type": "object",
            "propertyNames": {"pattern": "^[0-9]+$"},
            "additionalProperties": {
                "type": "object",
                "required": ["address"],
                "properties": {
                    "address": {"type": "string", "pattern": "^0x[0-9a-fA-F]{40}$"},
                },
            },
        },
    },
}


@lru_cache(maxsize=16)
def load_artifact(contract_name: str) -> dict[str, Any]:
    """
    Load and validate a contract artifact.

    Args:
        contract_name: Contract name (e.g., "Content")

    Returns:
        Artifact dict with "abi" and "networks"

    Raises:
        FileNotFoundError: If the artifact is not shipped with the package
        ConfigError: If the artifact does not match the expected layout
    """
    path = ARTIFACTS_DIR / f"{contract_name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Contract artifact not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        artifact = json.load(f)

    validator = jsonschema.Draft202012Validator(ARTIFACT_SCHEMA)
    errors = sorted(validator.iter_errors(artifact), key=lambda e: [str(p) for p in e.path])
    if errors:
        location = "/".join(str(part) for part in errors[0].path) or "<root>"
        raise ConfigError(
            f"Invalid artifact {path.name}: {location}: {errors[0].message}"
        )

    return artifact


def load_abi(contract_name: str) -> list[dict[str, Any]]:
    """Load the ABI list for a shipped contract.  Callers get their own copy."""
    return copy.deepcopy(load_artifact(contract_name)["abi"])


def content_abi() -> list[dict[str, Any]]:
    """Load Content ABI."""
    return load_abi("Content")


def find_function(abi: list[dict[str, Any]], function_name: str) -> dict[str, Any]:
    """Return the ABI entry for a function, or raise ValueError."""
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ValueError(f"Function {function_name} not found in ABI")


def is_read_only(entry: dict[str, Any]) -> bool:
    return entry.get("stateMutability") in ("view", "pure")


def content_address(chain_id: int, contract_name: str = "Content") -> str:
    """
    Resolve the deployed contract address for a chain.

    Priority: CONTENT_ADDRESS env var  >  artifact "networks" entry.

    Raises:
        ConfigError: If no address is known for the chain
    """
    override: Optional[str] = get_setting("CONTENT_ADDRESS")
    if override:
        return override

    networks = load_artifact(contract_name)["networks"]
    entry = networks.get(str(chain_id))
    if entry is None:
        raise ConfigError(
            f"No {contract_name} deployment known for chain {chain_id}. "
            "Set CONTENT_ADDRESS or pass the address explicitly."
        )
    return entry["address"]
