__all__ = [
    # Errors
    "LukupError",
    "InvalidArgument",
    "EncodingOverflow",
    "InvalidMnemonic",
    "UnsupportedAccount",
    "RemoteCallFailed",
    "ConfigError",
    # Network / address book
    "Network",
    "NETWORKS",
    "get_network",
    "content_address",
    # Wallet
    "WalletIdentity",
    "generate_mnemonic",
    "create_random",
    "import_from_mnemonic",
    "from_private_key",
    "from_external_account",
    "rebind",
    "load_identity",
    # Contracts
    "ContentContract",
    "ContentFunction",
    "FeeOptions",
    "OPERATIONS",
    # Encoding utilities
    "DataType",
    "validate_input",
    "sanitise_input",
    "encode_bytes32",
    "decode_bytes32",
]

from .errors import (
    ConfigError,
    EncodingOverflow,
    InvalidArgument,
    InvalidMnemonic,
    LukupError,
    RemoteCallFailed,
    UnsupportedAccount,
)
from .chain.abi import content_address
from .chain.network import NETWORKS, Network, get_network
from .wallet.identity import (
    WalletIdentity,
    create_random,
    from_external_account,
    from_private_key,
    generate_mnemonic,
    import_from_mnemonic,
    rebind,
)
from .wallet.keystore import load_identity
from .contract.base import FeeOptions
from .contract.content import OPERATIONS, ContentContract, ContentFunction
from .contract.types import (
    DataType,
    decode_bytes32,
    encode_bytes32,
    sanitise_input,
    validate_input,
)
