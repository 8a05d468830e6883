"""
Wallet persistence in ~/.lukup/.env.

The mnemonic (preferred) or a raw private key is stored in the dotenv file
and turned back into a WalletIdentity on load.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..chain.network import Network
from ..config import LUKUP_ENV, get_setting, save_settings
from ..errors import ConfigError
from .identity import (
    DEFAULT_HD_PATH,
    WalletIdentity,
    from_private_key,
    import_from_mnemonic,
)


def save_mnemonic(
    phrase: str,
    path: Optional[str] = None,
    env_path: Optional[Path] = None,
) -> Path:
    """Store a mnemonic and its derivation path.  Returns the dotenv path."""
    return save_settings(
        {"LUKUP_MNEMONIC": phrase, "LUKUP_HD_PATH": path or DEFAULT_HD_PATH},
        env_path,
    )


def load_identity(network: Optional[Network] = None) -> WalletIdentity:
    """
    Build the configured wallet identity.

    Raises:
        ConfigError: If neither LUKUP_MNEMONIC nor PRIVATE_KEY is set
        InvalidMnemonic: If the stored phrase is not valid
    """
    phrase = get_setting("LUKUP_MNEMONIC")
    if phrase:
        return import_from_mnemonic(phrase, get_setting("LUKUP_HD_PATH"), network)

    private_key = get_setting("PRIVATE_KEY")
    if private_key:
        return from_private_key(private_key, network)

    raise ConfigError(
        f"No wallet configured. Run 'lukup wallet new' or set LUKUP_MNEMONIC "
        f"in {LUKUP_ENV}"
    )
