"""
Configuration for the Lukup SDK.

Settings live in ~/.lukup/.env and are read through python-dotenv into the
process environment.  Explicit environment variables always win over the
file, except where load_env(override=True) is requested.

Keys:
- LUKUP_MNEMONIC / LUKUP_HD_PATH: wallet seed phrase and derivation path
- PRIVATE_KEY:      hex private key (alternative to the mnemonic)
- LUKUP_NETWORK:    name of a known network (e.g. "sepolia")
- LUKUP_RPC_URL / LUKUP_CHAIN_ID: custom endpoint
- CONTENT_ADDRESS:  deployed Content contract address
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, load_dotenv


LUKUP_DIR = Path.home() / ".lukup"
LUKUP_ENV = LUKUP_DIR / ".env"


def load_env(env_path: Optional[Path] = None, override: bool = False) -> None:
    """Load the dotenv file into os.environ if it exists."""
    env_path = env_path or LUKUP_ENV
    if env_path.exists():
        load_dotenv(env_path, override=override)


def get_setting(key: str, default: Optional[str] = None) -> Optional[str]:
    """Read a setting from the environment, loading the dotenv file first."""
    load_env()
    value = os.environ.get(key)
    if value is None or value == "":
        return default
    return value


def save_settings(values: dict[str, str], env_path: Optional[Path] = None) -> Path:
    """
    Merge key/value pairs into the dotenv file.

    Existing keys not in ``values`` are preserved.  The file is created with
    owner-only permissions on POSIX systems since it may hold key material.

    Returns:
        Path to the written file
    """
    env_path = env_path or LUKUP_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = {k: v for k, v in dotenv_values(env_path).items() if v is not None}

    existing.update(values)

    lines = [f'{k}="{v}"' for k, v in existing.items()]
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    if os.name != "nt":
        env_path.chmod(0o600)

    return env_path
