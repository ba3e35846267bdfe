"""
Network parameter value objects.

A NetworkParameterSet bundles everything one network declares: consensus constants, network identity,
address prefixes, seeds, checkpoints, the genesis block and operational flags. Instances are frozen and
shared by every reader once the registry has built them.
"""
import ipaddress
import json
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from chainparams.block import Block
from chainparams.core import AddressError, DataEncodingError, ParameterValidationError
from chainparams.cryptography import HashType, hash160
from chainparams.data import bits_to_target, decode_base58check, encode_base58check
from chainparams.params.consensus import ConsensusParams

__all__ = ["Base58Type", "AddressPrefixTable", "NetworkIdentity", "CheckpointSet", "DNSSeed", "SeedSpec",
           "NetworkParameterSet"]


class Base58Type(Enum):
    PUBKEY_ADDRESS = "pubkey_address"
    SCRIPT_ADDRESS = "script_address"
    SECRET_KEY = "secret_key"
    EXT_PUBLIC_KEY = "ext_public_key"
    EXT_SECRET_KEY = "ext_secret_key"
    EXT_COIN_TYPE = "ext_coin_type"


# Kinds whose prefixes share an encoding space and so must not collide within one network
_DISTINCT_GROUPS = (
    (Base58Type.PUBKEY_ADDRESS, Base58Type.SCRIPT_ADDRESS, Base58Type.SECRET_KEY),
    (Base58Type.EXT_PUBLIC_KEY, Base58Type.EXT_SECRET_KEY),
)

# Kinds that are encoded as `prefix || payload` in base58check addresses and keys
_ADDRESS_KINDS = (Base58Type.PUBKEY_ADDRESS, Base58Type.SCRIPT_ADDRESS, Base58Type.SECRET_KEY)


class AddressPrefixTable(Mapping):
    """
    Read-only Base58Type -> prefix bytes mapping. Every kind must be present.
    """
    __slots__ = ("_prefixes",)

    def __init__(self, prefixes: Mapping[Base58Type, bytes]):
        missing = [kind.name for kind in Base58Type if kind not in prefixes]
        if missing:
            raise ValueError(f"Address prefix table missing {', '.join(missing)}")
        self._prefixes = MappingProxyType({kind: bytes(prefixes[kind]) for kind in Base58Type})

    def __getitem__(self, kind: Base58Type) -> bytes:
        return self._prefixes[kind]

    def __iter__(self) -> Iterator[Base58Type]:
        return iter(self._prefixes)

    def __len__(self) -> int:
        return len(self._prefixes)

    def prefix_byte(self, kind: Base58Type) -> int:
        """The integer value of a single-byte prefix"""
        prefix = self._prefixes[kind]
        if len(prefix) != 1:
            raise ValueError(f"{kind.name} prefix is {len(prefix)} bytes, not a single byte")
        return prefix[0]

    def validate(self, network: str) -> None:
        for group in _DISTINCT_GROUPS:
            seen = {}
            for kind in group:
                prefix = self._prefixes[kind]
                if not prefix:
                    raise ParameterValidationError(network, f"{kind.name} prefix is empty")
                if prefix in seen:
                    raise ParameterValidationError(
                        network, f"{kind.name} and {seen[prefix].name} share prefix {prefix.hex()}")
                seen[prefix] = kind

    # --- ADDRESSES --- #

    def encode(self, kind: Base58Type, payload: bytes) -> str:
        return encode_base58check(self._prefixes[kind] + payload)

    def decode(self, encoded: str) -> tuple[Base58Type, bytes]:
        """
        Returns the kind and payload of a base58check address or key encoded under this table
        """
        try:
            raw = decode_base58check(encoded)
        except DataEncodingError as e:
            raise AddressError(f"Invalid address {encoded!r}: {e}") from e

        for kind in _ADDRESS_KINDS:
            prefix = self._prefixes[kind]
            if raw.startswith(prefix) and len(raw) > len(prefix):
                return kind, raw[len(prefix):]
        raise AddressError(f"Address {encoded!r} does not carry a prefix of this network")

    def to_dict(self) -> dict:
        return {kind.value: prefix.hex() for kind, prefix in self._prefixes.items()}

    def __repr__(self):
        return f"AddressPrefixTable({self.to_dict()})"


@dataclass(frozen=True)
class NetworkIdentity:
    message_start: bytes
    default_port: int
    max_tip_age: int
    prune_after_height: int
    alert_pubkey: bytes = b''

    def validate(self, network: str) -> None:
        if len(self.message_start) != 4:
            raise ParameterValidationError(network, "message start must be 4 bytes")
        if not 0 < self.default_port <= 0xffff:
            raise ParameterValidationError(network, f"default port {self.default_port} out of range")


@dataclass(frozen=True)
class CheckpointSet:
    """
    Hard-coded (height, block hash) anchors with the statistics used to estimate sync progress
    """
    checkpoints: Mapping[int, bytes]
    last_checkpoint_time: int
    transactions_at_checkpoint: int
    transactions_per_day: float

    def __post_init__(self):
        object.__setattr__(self, "checkpoints", MappingProxyType(dict(self.checkpoints)))

    def __hash__(self):
        return hash((frozenset(self.checkpoints.items()), self.last_checkpoint_time, self.transactions_at_checkpoint,
                     self.transactions_per_day))

    @property
    def heights(self) -> list[int]:
        return list(self.checkpoints)

    @property
    def last_checkpoint_height(self) -> Optional[int]:
        return self.heights[-1] if self.checkpoints else None

    def hash_at(self, height: int) -> Optional[bytes]:
        return self.checkpoints.get(height)

    def estimated_transactions(self, now: int) -> float:
        """
        Transactions expected on the chain at `now`: the checkpoint count plus the daily rate since the
        checkpoint time
        """
        elapsed_days = max(now - self.last_checkpoint_time, 0) / (24 * 60 * 60)
        return self.transactions_at_checkpoint + elapsed_days * self.transactions_per_day

    def validate(self, network: str, genesis_hash: bytes) -> None:
        heights = self.heights
        if any(h < 0 for h in heights):
            raise ParameterValidationError(network, "checkpoint heights must be non-negative")
        if any(lower >= upper for lower, upper in zip(heights, heights[1:])):
            raise ParameterValidationError(network, "checkpoint heights must be strictly ascending")
        if 0 in self.checkpoints and self.checkpoints[0] != genesis_hash:
            raise ParameterValidationError(network, "checkpoint at height 0 is not the genesis hash")


@dataclass(frozen=True)
class DNSSeed:
    name: str
    host: str


@dataclass(frozen=True)
class SeedSpec:
    """
    A fixed seed node address
    """
    host: str
    port: int

    @classmethod
    def from_string(cls, entry: str, default_port: int) -> "SeedSpec":
        """
        Parses "1.2.3.4", "1.2.3.4:23100", "[2001:db8::1]:23100" or a bare IPv6 address
        """
        host, port = entry, default_port
        if entry.startswith("["):
            host, _, rest = entry[1:].partition("]")
            if rest:
                port = int(rest.lstrip(":"))
        elif entry.count(":") == 1:
            host, port_str = entry.split(":")
            port = int(port_str)

        address = ipaddress.ip_address(host)
        if not 0 < port <= 0xffff:
            raise ValueError(f"Seed port {port} out of range")
        return cls(str(address), port)

    def __str__(self):
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"


def _is_serialized_pubkey(hex_key: str) -> bool:
    try:
        key = bytes.fromhex(hex_key)
    except ValueError:
        return False
    return (len(key) == 33 and key[0] in (2, 3)) or (len(key) == 65 and key[0] == 4)


@dataclass(frozen=True, eq=False)
class NetworkParameterSet:
    """
    Everything one network declares. Compared and hashed by identity: the registry builds one shared
    instance per network.
    """
    network_id: str
    consensus: ConsensusParams
    network_identity: NetworkIdentity
    address_prefixes: AddressPrefixTable
    checkpoints: CheckpointSet
    genesis: Block
    dns_seeds: tuple[DNSSeed, ...] = ()
    fixed_seeds: tuple[SeedSpec, ...] = ()
    mining_requires_peers: bool = True
    default_consistency_checks: bool = False
    require_standard: bool = True
    mine_blocks_on_demand: bool = False
    testnet_to_be_deprecated_field_rpc: bool = False
    pool_max_transactions: int = 3
    fulfilled_request_expire_time: int = 60 * 60
    spork_pubkey: str = ""
    masternode_payments_pubkey: str = ""
    block_hash_type: HashType = HashType.X11

    # --- CONVENIENCE --- #

    @property
    def message_start(self) -> bytes:
        return self.network_identity.message_start

    @property
    def default_port(self) -> int:
        return self.network_identity.default_port

    @property
    def genesis_hash(self) -> bytes:
        return self.consensus.hash_genesis_block

    def encode_address(self, kind: Base58Type, payload: bytes) -> str:
        return self.address_prefixes.encode(kind, payload)

    def decode_address(self, address: str) -> tuple[Base58Type, bytes]:
        return self.address_prefixes.decode(address)

    def pubkey_to_address(self, pubkey: bytes) -> str:
        return self.encode_address(Base58Type.PUBKEY_ADDRESS, hash160(pubkey))

    # --- VALIDATION --- #

    def validate(self) -> None:
        network = self.network_id
        self.consensus.validate(network)
        self.network_identity.validate(network)
        self.address_prefixes.validate(network)

        if self.consensus.hash_genesis_block is None:
            raise ParameterValidationError(network, "genesis hash has not been set")
        self.checkpoints.validate(network, self.consensus.hash_genesis_block)

        if bits_to_target(self.genesis.bits) > self.consensus.pow_limit:
            raise ParameterValidationError(network, "genesis target is easier than the pow limit")
        for name in ("spork_pubkey", "masternode_payments_pubkey"):
            key = getattr(self, name)
            if key and not _is_serialized_pubkey(key):
                raise ParameterValidationError(network, f"{name} is not a serialized public key")

    # --- DISPLAY --- #

    def to_dict(self) -> dict:
        return {
            "network_id": self.network_id,
            "genesis_hash": self.genesis_hash[::-1].hex(),
            "message_start": self.message_start.hex(),
            "default_port": self.default_port,
            "max_tip_age": self.network_identity.max_tip_age,
            "prune_after_height": self.network_identity.prune_after_height,
            "consensus": self.consensus.to_dict(),
            "address_prefixes": self.address_prefixes.to_dict(),
            "checkpoints": {height: h[::-1].hex() for height, h in self.checkpoints.checkpoints.items()},
            "dns_seeds": [seed.host for seed in self.dns_seeds],
            "fixed_seeds": [str(seed) for seed in self.fixed_seeds],
            "mining_requires_peers": self.mining_requires_peers,
            "default_consistency_checks": self.default_consistency_checks,
            "require_standard": self.require_standard,
            "mine_blocks_on_demand": self.mine_blocks_on_demand,
            "testnet_to_be_deprecated_field_rpc": self.testnet_to_be_deprecated_field_rpc,
            "pool_max_transactions": self.pool_max_transactions,
            "fulfilled_request_expire_time": self.fulfilled_request_expire_time,
            "block_hash_type": self.block_hash_type.value
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
