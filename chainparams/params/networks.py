"""
The literal parameter tables for the Aeris networks

    main    - the production network
    test    - the public test network
    regtest - local regression testing; blocks can be mined on demand

Each factory builds its genesis block, checks it against the hard-coded hashes, and returns a validated
NetworkParameterSet. Nothing here touches global state.
"""
from dataclasses import replace

from chainparams.block import Block
from chainparams.core import COIN
from chainparams.data import uint256_from_hex, uint256_to_int
from chainparams.params.consensus import DISABLED, ConsensusParams, DeploymentPos, SoftForkDeployment
from chainparams.params.genesis import create_aeris_genesis_block, verify_genesis
from chainparams.params.network import AddressPrefixTable, Base58Type, CheckpointSet, NetworkIdentity, \
    NetworkParameterSet

__all__ = ["MAIN", "TESTNET", "REGTEST", "main_params", "testnet_params", "regtest_params"]

MAIN = "main"
TESTNET = "test"
REGTEST = "regtest"

# Shared by all three networks
GENESIS_TIME = 1517849983
GENESIS_NONCE = 2442161
GENESIS_BITS = 0x1e0ffff0
GENESIS_VERSION = 1
GENESIS_REWARD = 50 * COIN
GENESIS_HASH = uint256_from_hex("0x00000ac3b982c0b616ae1a4188c1222c340979d3c69bdeffcd757c40037ef607")
GENESIS_MERKLE_ROOT = uint256_from_hex("0x1799a2ff8e3776c2386f8b9b554da902a79e86072f48c8bf5c702f3c29c295e4")

POW_LIMIT = uint256_to_int(uint256_from_hex("00000fffff000000000000000000000000000000000000000000000000000000"))
REGTEST_POW_LIMIT = uint256_to_int(
    uint256_from_hex("7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"))

# Never-ending deployment window used by regtest
NO_TIMEOUT = 999999999999


def _with_genesis(network: str, consensus: ConsensusParams) -> tuple[ConsensusParams, Block]:
    """
    Build the network's genesis block, verify it and record its hash in the consensus parameters
    """
    genesis = create_aeris_genesis_block(GENESIS_TIME, GENESIS_NONCE, GENESIS_BITS, GENESIS_VERSION, GENESIS_REWARD)
    genesis_hash = verify_genesis(network, genesis, GENESIS_HASH, GENESIS_MERKLE_ROOT)
    return replace(consensus, hash_genesis_block=genesis_hash), genesis


def _prefixes(pubkey: int, script: int, secret: int, ext_public: str, ext_secret: str,
              coin_type: str) -> AddressPrefixTable:
    return AddressPrefixTable({
        Base58Type.PUBKEY_ADDRESS: bytes([pubkey]),
        Base58Type.SCRIPT_ADDRESS: bytes([script]),
        Base58Type.SECRET_KEY: bytes([secret]),
        Base58Type.EXT_PUBLIC_KEY: bytes.fromhex(ext_public),
        Base58Type.EXT_SECRET_KEY: bytes.fromhex(ext_secret),
        Base58Type.EXT_COIN_TYPE: bytes.fromhex(coin_type),
    })


def _genesis_checkpoints(genesis_hash: bytes) -> CheckpointSet:
    return CheckpointSet(
        checkpoints={0: genesis_hash},
        last_checkpoint_time=GENESIS_TIME,
        transactions_at_checkpoint=0,
        transactions_per_day=500
    )


def main_params() -> NetworkParameterSet:
    consensus = ConsensusParams(
        subsidy_halving_interval=262800,
        masternode_payments_start_block=322,
        masternode_payments_increase_block=DISABLED,
        masternode_payments_increase_period=DISABLED,
        instant_send_keep_lock=94,
        budget_payments_start_block=65123,
        budget_payments_cycle_blocks=64800,
        budget_payments_window_blocks=390,
        budget_proposal_establishing_time=60 * 60 * 24,
        superblock_start_block=2100000000,
        superblock_cycle=64800,
        governance_min_quorum=10,
        governance_filter_elements=20000,
        masternode_minimum_confirmations=20,
        majority_enforce_block_upgrade=750,
        majority_reject_block_outdated=950,
        majority_window=3900,
        bip34_height=DISABLED,
        bip34_hash=uint256_from_hex("0x000000000000024b89b42a942fe0d9fea3bb44ab7bd1b19115dd6a759c0808b8"),
        pow_limit=POW_LIMIT,
        pow_target_timespan=60 * 60,
        pow_target_spacing=2 * 60,
        pow_allow_min_difficulty_blocks=False,
        pow_no_retargeting=False,
        rule_activation_threshold=1916,  # 95% of 2016
        confirmation_window=2016,
        deployments={
            DeploymentPos.TESTDUMMY: SoftForkDeployment(bit=28, start_time=1199145601, timeout=1230767999),
            DeploymentPos.CSV: SoftForkDeployment(bit=0, start_time=1486252800, timeout=1517788800),
        }
    )
    consensus, genesis = _with_genesis(MAIN, consensus)

    params = NetworkParameterSet(
        network_id=MAIN,
        consensus=consensus,
        network_identity=NetworkIdentity(
            message_start=bytes.fromhex("4c61c511"),
            default_port=23100,
            max_tip_age=11520,
            prune_after_height=100000,
            alert_pubkey=bytes.fromhex(
                "041e203913367e77bf815454639a688aeb44802f5b58f8657b34f6349a90410457f1b244a3c208db8d5cd2a12007aab5c4"
                "0b593f2cfd3c25b4e03dcb8516d2b8c6")
        ),
        # EXT_COIN_TYPE 80000005 is the value deployed wallets derive with; changing it is a migration
        address_prefixes=_prefixes(23, 63, 79, "0488B21E", "0488ADE4", "80000005"),
        checkpoints=_genesis_checkpoints(consensus.hash_genesis_block),
        genesis=genesis,
        mining_requires_peers=True,
        default_consistency_checks=False,
        require_standard=True,
        mine_blocks_on_demand=False,
        testnet_to_be_deprecated_field_rpc=False,
        pool_max_transactions=3,
        fulfilled_request_expire_time=60 * 60,
        spork_pubkey="046dac102bd50159b19640d07f8fa3618b1531a10d8bada1ec00361e5f0a2c9805d927a0c82d408db6f589683d4291f"
                     "adeef20ab59b255279ff99fe88b78ee5c71",
        masternode_payments_pubkey="046dac102bd50159b19640d07f8fa3618b1531a10d8bada1ec00361e5f0a2c9805d927a0c82d408"
                                   "db6f589683d4291fadeef20ab59b255279ff99fe88b78ee5c71"
    )
    params.validate()
    return params


def testnet_params() -> NetworkParameterSet:
    consensus = ConsensusParams(
        subsidy_halving_interval=DISABLED,
        masternode_payments_start_block=121,
        masternode_payments_increase_block=DISABLED,
        masternode_payments_increase_period=DISABLED,
        instant_send_keep_lock=24,
        budget_payments_start_block=2282,
        budget_payments_cycle_blocks=90,
        budget_payments_window_blocks=39,
        budget_proposal_establishing_time=60 * 12,
        superblock_start_block=2432,
        superblock_cycle=90,
        governance_min_quorum=1,
        governance_filter_elements=500,
        masternode_minimum_confirmations=1,
        majority_enforce_block_upgrade=51,
        majority_reject_block_outdated=75,
        majority_window=390,
        bip34_height=DISABLED,
        bip34_hash=uint256_from_hex("0x0"),
        pow_limit=POW_LIMIT,
        pow_target_timespan=60,
        pow_target_spacing=40,
        pow_allow_min_difficulty_blocks=True,
        pow_no_retargeting=False,
        rule_activation_threshold=8,
        confirmation_window=11,
        deployments={
            DeploymentPos.TESTDUMMY: SoftForkDeployment(bit=28, start_time=1199145601, timeout=1230767999),
            DeploymentPos.CSV: SoftForkDeployment(bit=0, start_time=1456790400, timeout=1493596800),
        }
    )
    consensus, genesis = _with_genesis(TESTNET, consensus)

    params = NetworkParameterSet(
        network_id=TESTNET,
        consensus=consensus,
        network_identity=NetworkIdentity(
            message_start=bytes.fromhex("4fd16dee"),
            default_port=23200,
            max_tip_age=0x7fffffff,
            prune_after_height=1000,
            alert_pubkey=bytes.fromhex(
                "042736aa94dcc46a596d1f42a5402261b6d9d8a72de40ace5a8856f9e5f7bab96f837f926a8ab8d1e2f8d6d7ef59732d"
                "99b55352c4fdf775bdb9690c42851609bd")
        ),
        address_prefixes=_prefixes(83, 125, 141, "043587CF", "04358394", "80000001"),
        checkpoints=_genesis_checkpoints(consensus.hash_genesis_block),
        genesis=genesis,
        mining_requires_peers=False,
        default_consistency_checks=False,
        require_standard=False,
        mine_blocks_on_demand=False,
        testnet_to_be_deprecated_field_rpc=True,
        pool_max_transactions=3,
        fulfilled_request_expire_time=5 * 60,
        spork_pubkey="04d2b954a7d4d5f69338cc41d59b59d2b022682b849272b8d0b354ea63cb9771493619ae3ecfc94719c05aeb2ac8f80"
                     "ba1d546fe40562c5ce1de61089f5db4546d",
        masternode_payments_pubkey="04d2b954a7d4d5f69338cc41d59b59d2b022682b849272b8d0b354ea63cb9771493619ae3ecfc94"
                                   "719c05aeb2ac8f80ba1d546fe40562c5ce1de61089f5db4546d"
    )
    params.validate()
    return params


def regtest_params() -> NetworkParameterSet:
    consensus = ConsensusParams(
        subsidy_halving_interval=DISABLED,
        masternode_payments_start_block=121,
        masternode_payments_increase_block=DISABLED,
        masternode_payments_increase_period=DISABLED,
        instant_send_keep_lock=6,
        budget_payments_start_block=212,
        budget_payments_cycle_blocks=90,
        budget_payments_window_blocks=39,
        budget_proposal_establishing_time=60 * 12,
        superblock_start_block=318,
        superblock_cycle=10,
        governance_min_quorum=1,
        governance_filter_elements=100,
        masternode_minimum_confirmations=1,
        majority_enforce_block_upgrade=750,
        majority_reject_block_outdated=950,
        majority_window=1000,
        bip34_height=DISABLED,
        bip34_hash=uint256_from_hex("0x0"),
        pow_limit=REGTEST_POW_LIMIT,
        pow_target_timespan=24 * 60 * 60,
        pow_target_spacing=40,
        pow_allow_min_difficulty_blocks=True,
        pow_no_retargeting=True,
        rule_activation_threshold=108,  # 75% of 144
        confirmation_window=144,
        deployments={
            DeploymentPos.TESTDUMMY: SoftForkDeployment(bit=28, start_time=0, timeout=NO_TIMEOUT),
            DeploymentPos.CSV: SoftForkDeployment(bit=0, start_time=0, timeout=NO_TIMEOUT),
        }
    )
    consensus, genesis = _with_genesis(REGTEST, consensus)

    params = NetworkParameterSet(
        network_id=REGTEST,
        consensus=consensus,
        network_identity=NetworkIdentity(
            message_start=bytes.fromhex("e6cea3ba"),
            default_port=23300,
            max_tip_age=60 * 60,
            prune_after_height=1000
        ),
        address_prefixes=_prefixes(61, 69, 59, "043587CF", "04358394", "80000001"),
        checkpoints=_genesis_checkpoints(consensus.hash_genesis_block),
        genesis=genesis,
        mining_requires_peers=False,
        default_consistency_checks=True,
        require_standard=False,
        mine_blocks_on_demand=True,
        testnet_to_be_deprecated_field_rpc=False,
        fulfilled_request_expire_time=5 * 60
    )
    params.validate()
    return params
