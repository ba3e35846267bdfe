"""
Consensus parameters: the numeric and behavioural constants every node on a network must agree on
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from chainparams.core import ParameterValidationError
from chainparams.data import target_to_bits

__all__ = ["DISABLED", "MAX_VERSION_BITS_BIT", "DeploymentPos", "SoftForkDeployment", "ConsensusParams"]

# Sentinel for block-height or interval knobs that switch a feature off
DISABLED = -1

# Bits above 28 are reserved by the version-bits top mask
MAX_VERSION_BITS_BIT = 28


class DeploymentPos(Enum):
    TESTDUMMY = "testdummy"
    CSV = "csv"


@dataclass(frozen=True)
class SoftForkDeployment:
    """
    A version-bits rule change: signalled on `bit`, eligible between start_time and timeout (epoch seconds)
    """
    bit: int
    start_time: int
    timeout: int

    def validate(self, network: str, name: str) -> None:
        if not 0 <= self.bit <= MAX_VERSION_BITS_BIT:
            raise ParameterValidationError(network, f"deployment {name} bit {self.bit} outside 0..28")
        if self.start_time >= self.timeout:
            raise ParameterValidationError(
                network, f"deployment {name} start time {self.start_time} is not before timeout {self.timeout}")

    def is_active_window(self, median_time_past: int) -> bool:
        return self.start_time <= median_time_past < self.timeout


@dataclass(frozen=True)
class ConsensusParams:
    subsidy_halving_interval: int
    masternode_payments_start_block: int
    masternode_payments_increase_block: int
    masternode_payments_increase_period: int
    instant_send_keep_lock: int
    budget_payments_start_block: int
    budget_payments_cycle_blocks: int
    budget_payments_window_blocks: int
    budget_proposal_establishing_time: int
    superblock_start_block: int
    superblock_cycle: int
    governance_min_quorum: int
    governance_filter_elements: int
    masternode_minimum_confirmations: int
    majority_enforce_block_upgrade: int
    majority_reject_block_outdated: int
    majority_window: int
    bip34_height: int
    bip34_hash: bytes
    pow_limit: int
    pow_target_timespan: int
    pow_target_spacing: int
    pow_allow_min_difficulty_blocks: bool
    pow_no_retargeting: bool
    rule_activation_threshold: int
    confirmation_window: int
    deployments: Mapping[DeploymentPos, SoftForkDeployment] = field(default_factory=dict)
    # Set once the genesis block has been built and verified
    hash_genesis_block: Optional[bytes] = None

    def __post_init__(self):
        object.__setattr__(self, "deployments", MappingProxyType(dict(self.deployments)))

    def __hash__(self):
        values = tuple(getattr(self, name) for name in self.__dataclass_fields__ if name != "deployments")
        return hash(values + (frozenset(self.deployments.items()),))

    @property
    def difficulty_adjustment_interval(self) -> int:
        return self.pow_target_timespan // self.pow_target_spacing

    @property
    def pow_limit_bits(self) -> int:
        return target_to_bits(self.pow_limit)

    @property
    def halvings_enabled(self) -> bool:
        return self.subsidy_halving_interval != DISABLED

    def validate(self, network: str) -> None:
        if self.rule_activation_threshold > self.confirmation_window:
            raise ParameterValidationError(
                network, f"rule activation threshold {self.rule_activation_threshold} exceeds confirmation "
                         f"window {self.confirmation_window}")
        for name in ("majority_enforce_block_upgrade", "majority_reject_block_outdated"):
            if getattr(self, name) > self.majority_window:
                raise ParameterValidationError(network, f"{name} exceeds majority window {self.majority_window}")
        if self.pow_target_spacing <= 0 or self.pow_target_timespan < self.pow_target_spacing:
            raise ParameterValidationError(network, "target timespan must cover at least one target spacing")
        if not 0 < self.pow_limit < 1 << 256:
            raise ParameterValidationError(network, "pow limit outside the 256-bit range")

        for pos, deployment in self.deployments.items():
            deployment.validate(network, pos.value)
        bits = [d.bit for d in self.deployments.values()]
        if len(bits) != len(set(bits)):
            raise ParameterValidationError(network, "two deployments share a version bit")

    def to_dict(self) -> dict:
        values = {
            name: getattr(self, name) for name in self.__dataclass_fields__
            if name not in ("deployments", "bip34_hash", "pow_limit", "hash_genesis_block")
        }
        values.update({
            "bip34_hash": self.bip34_hash[::-1].hex(),
            "pow_limit": f"{self.pow_limit:064x}",
            "hash_genesis_block": self.hash_genesis_block[::-1].hex() if self.hash_genesis_block else None,
            "deployments": {
                pos.value: {"bit": d.bit, "start_time": d.start_time, "timeout": d.timeout}
                for pos, d in self.deployments.items()
            }
        })
        return values
