"""
Tests for the per-network parameter tables
"""
import json
from dataclasses import replace

import pytest

from chainparams.core import AddressError, ParameterValidationError
from chainparams.cryptography import hash160
from chainparams.data import target_to_bits, uint256_from_hex, uint256_to_hex
from chainparams.params import DISABLED, MAX_VERSION_BITS_BIT, AddressPrefixTable, Base58Type, CheckpointSet, \
    DeploymentPos, NetworkIdentity, SeedSpec, SoftForkDeployment
from tests.utility import AERIS_GENESIS_HASH, AERIS_GENESIS_MERKLE_ROOT

NETWORKS = ("main", "test", "regtest")

# network -> (port, pubkey prefix, script prefix, secret prefix, message start)
LITERALS = {
    "main": (23100, 23, 63, 79, "4c61c511"),
    "test": (23200, 83, 125, 141, "4fd16dee"),
    "regtest": (23300, 61, 69, 59, "e6cea3ba"),
}

# network -> (pubkey address first characters, script address first characters)
ADDRESS_LEADS = {
    "main": ("A", "S"),
    "test": ("a", "s"),
    "regtest": ("R", "UV"),
}


@pytest.mark.parametrize("network", NETWORKS)
def test_genesis_pins(registry, network):
    params = registry.get(network)

    assert uint256_to_hex(params.genesis.block_id) == AERIS_GENESIS_HASH, f"{network} genesis hash mismatch"
    assert uint256_to_hex(params.genesis.merkle_root) == AERIS_GENESIS_MERKLE_ROOT
    assert params.genesis_hash == params.consensus.hash_genesis_block == params.genesis.block_id
    assert params.genesis.timestamp == 1517849983
    assert params.genesis.nonce == 2442161
    assert params.genesis.bits == 0x1e0ffff0


@pytest.mark.parametrize("network", NETWORKS)
def test_literal_tables(registry, network):
    params = registry.get(network)
    port, pubkey, script, secret, message_start = LITERALS[network]

    assert params.network_id == network
    assert params.network_identity.default_port == port
    assert params.default_port == port
    assert params.message_start.hex() == message_start
    assert params.address_prefixes.prefix_byte(Base58Type.PUBKEY_ADDRESS) == pubkey
    assert params.address_prefixes[Base58Type.PUBKEY_ADDRESS] == bytes([pubkey])
    assert params.address_prefixes.prefix_byte(Base58Type.SCRIPT_ADDRESS) == script
    assert params.address_prefixes.prefix_byte(Base58Type.SECRET_KEY) == secret


@pytest.mark.parametrize("network", NETWORKS)
def test_consensus_invariants(registry, network):
    consensus = registry.get(network).consensus

    assert consensus.rule_activation_threshold <= consensus.confirmation_window
    assert consensus.majority_enforce_block_upgrade <= consensus.majority_window
    assert consensus.majority_reject_block_outdated <= consensus.majority_window
    assert set(consensus.deployments) == set(DeploymentPos)
    for deployment in consensus.deployments.values():
        assert deployment.start_time < deployment.timeout
        assert 0 <= deployment.bit <= MAX_VERSION_BITS_BIT


@pytest.mark.parametrize("network", NETWORKS)
def test_checkpoints(registry, network):
    params = registry.get(network)
    heights = params.checkpoints.heights

    assert all(lower < upper for lower, upper in zip(heights, heights[1:]))
    assert params.checkpoints.hash_at(0) == params.genesis_hash
    assert params.checkpoints.last_checkpoint_height == 0


def test_main_consensus(registry):
    consensus = registry.get("main").consensus

    assert consensus.subsidy_halving_interval == 262800
    assert consensus.halvings_enabled
    assert consensus.masternode_payments_start_block == 322
    assert consensus.masternode_payments_increase_block == DISABLED
    assert consensus.difficulty_adjustment_interval == 30
    assert consensus.pow_limit_bits == 0x1e0fffff
    assert not consensus.pow_allow_min_difficulty_blocks
    assert consensus.deployments[DeploymentPos.CSV] == SoftForkDeployment(0, 1486252800, 1517788800)
    assert consensus.deployments[DeploymentPos.TESTDUMMY].bit == 28
    assert uint256_to_hex(consensus.bip34_hash) == "000000000000024b89b42a942fe0d9fea3bb44ab7bd1b19115dd6a759c0808b8"


def test_testnet_and_regtest_consensus(registry):
    test = registry.get("test").consensus
    regtest = registry.get("regtest").consensus

    assert not test.halvings_enabled and not regtest.halvings_enabled
    assert test.pow_allow_min_difficulty_blocks and not test.pow_no_retargeting
    assert regtest.pow_no_retargeting
    assert test.superblock_start_block == 2432 and regtest.superblock_cycle == 10
    assert regtest.pow_limit_bits == 0x207fffff
    assert regtest.deployments[DeploymentPos.CSV].is_active_window(0)
    assert test.bip34_hash == b'\x00' * 32


def test_operational_flags(registry):
    main, test, regtest = (registry.get(n) for n in NETWORKS)

    assert main.mining_requires_peers and main.require_standard and not main.mine_blocks_on_demand
    assert test.testnet_to_be_deprecated_field_rpc and not test.require_standard
    assert regtest.mine_blocks_on_demand and regtest.default_consistency_checks
    assert regtest.spork_pubkey == "" and regtest.network_identity.alert_pubkey == b''
    assert main.fulfilled_request_expire_time == 3600 and test.fulfilled_request_expire_time == 300
    assert main.spork_pubkey == main.masternode_payments_pubkey
    assert main.network_identity.max_tip_age == 11520


def test_ext_prefixes(registry):
    main_prefixes = registry.get("main").address_prefixes
    test_prefixes = registry.get("test").address_prefixes

    assert main_prefixes[Base58Type.EXT_PUBLIC_KEY].hex() == "0488b21e"
    assert main_prefixes[Base58Type.EXT_SECRET_KEY].hex() == "0488ade4"
    assert main_prefixes[Base58Type.EXT_COIN_TYPE].hex() == "80000005"
    assert test_prefixes[Base58Type.EXT_COIN_TYPE].hex() == "80000001"


@pytest.mark.parametrize("network", NETWORKS)
def test_addresses(registry, network):
    params = registry.get(network)
    pubkey_lead, script_lead = ADDRESS_LEADS[network]
    pubkey_hash = hash160(bytes.fromhex(params.spork_pubkey or "02" + "33" * 32))

    address = params.encode_address(Base58Type.PUBKEY_ADDRESS, pubkey_hash)
    script_address = params.encode_address(Base58Type.SCRIPT_ADDRESS, b'\x42' * 20)

    assert address[0] in pubkey_lead, f"{network} pubkey address starts with {address[0]}"
    assert script_address[0] in script_lead, f"{network} script address starts with {script_address[0]}"
    assert params.decode_address(address) == (Base58Type.PUBKEY_ADDRESS, pubkey_hash)
    assert params.decode_address(script_address) == (Base58Type.SCRIPT_ADDRESS, b'\x42' * 20)


def test_pubkey_to_address(registry):
    params = registry.get("main")
    pubkey = bytes.fromhex(params.spork_pubkey)
    assert params.decode_address(params.pubkey_to_address(pubkey)) == (Base58Type.PUBKEY_ADDRESS, hash160(pubkey))


def test_foreign_address(registry):
    main_address = registry.get("main").encode_address(Base58Type.PUBKEY_ADDRESS, b'\x01' * 20)
    with pytest.raises(AddressError):
        registry.get("test").decode_address(main_address)
    with pytest.raises(AddressError):
        registry.get("test").decode_address("not-an-address")


def test_to_json(registry):
    summary = json.loads(registry.get("test").to_json())

    assert summary["network_id"] == "test"
    assert summary["genesis_hash"] == AERIS_GENESIS_HASH
    assert summary["default_port"] == 23200
    assert summary["address_prefixes"]["pubkey_address"] == "53"
    assert summary["consensus"]["deployments"]["csv"]["bit"] == 0
    assert summary["consensus"]["pow_limit"] == "00000fffff" + "0" * 54


# --- VALIDATION --- #

def test_consensus_validation(registry):
    consensus = registry.get("main").consensus

    with pytest.raises(ParameterValidationError):
        replace(consensus, rule_activation_threshold=2017).validate("main")
    with pytest.raises(ParameterValidationError):
        replace(consensus, majority_enforce_block_upgrade=4000).validate("main")
    with pytest.raises(ParameterValidationError):
        replace(consensus, pow_limit=0).validate("main")
    with pytest.raises(ParameterValidationError):
        replace(consensus, deployments={DeploymentPos.CSV: SoftForkDeployment(0, 10, 10)}).validate("main")
    with pytest.raises(ParameterValidationError):
        replace(consensus, deployments={DeploymentPos.CSV: SoftForkDeployment(29, 0, 10)}).validate("main")
    with pytest.raises(ParameterValidationError) as shared_bit:
        replace(consensus, deployments={
            DeploymentPos.CSV: SoftForkDeployment(1, 0, 10),
            DeploymentPos.TESTDUMMY: SoftForkDeployment(1, 0, 10),
        }).validate("main")
    assert shared_bit.value.network == "main"


def test_parameter_set_validation(registry):
    params = registry.get("test")
    params.validate()

    bad_checkpoints = CheckpointSet({0: params.genesis_hash, 10: b'\x01' * 32, 5: b'\x02' * 32}, 0, 0, 0)
    with pytest.raises(ParameterValidationError):
        replace(params, checkpoints=bad_checkpoints).validate()

    wrong_genesis = CheckpointSet({0: b'\x01' * 32}, 0, 0, 0)
    with pytest.raises(ParameterValidationError):
        replace(params, checkpoints=wrong_genesis).validate()

    with pytest.raises(ParameterValidationError):
        replace(params, spork_pubkey="04abcd").validate()

    with pytest.raises(ParameterValidationError):
        replace(params, network_identity=NetworkIdentity(b'\x01\x02\x03', 23200, 0, 0)).validate()

    # The genesis target must not exceed the pow limit
    tight_limit = replace(params.consensus, pow_limit=1 << 200)
    with pytest.raises(ParameterValidationError):
        replace(params, consensus=tight_limit).validate()

    unhashed = replace(params.consensus, hash_genesis_block=None)
    with pytest.raises(ParameterValidationError):
        replace(params, consensus=unhashed).validate()


def test_prefix_table():
    prefixes = {kind: bytes([i]) for i, kind in enumerate(Base58Type)}
    table = AddressPrefixTable(prefixes)
    assert len(table) == 6 and table[Base58Type.SECRET_KEY] == b'\x02'
    table.validate("unit")

    with pytest.raises(ValueError):
        AddressPrefixTable({Base58Type.PUBKEY_ADDRESS: b'\x00'})

    prefixes[Base58Type.SCRIPT_ADDRESS] = prefixes[Base58Type.PUBKEY_ADDRESS]
    with pytest.raises(ParameterValidationError):
        AddressPrefixTable(prefixes).validate("unit")

    with pytest.raises(ValueError):
        AddressPrefixTable({kind: b'\x04\x88' for kind in Base58Type}).prefix_byte(Base58Type.EXT_PUBLIC_KEY)


def test_checkpoint_estimates():
    checkpoints = CheckpointSet({0: b'\x00' * 32}, last_checkpoint_time=1000, transactions_at_checkpoint=10,
                                transactions_per_day=500)
    assert checkpoints.estimated_transactions(1000) == 10
    assert checkpoints.estimated_transactions(1000 + 2 * 24 * 60 * 60) == 1010
    assert checkpoints.estimated_transactions(0) == 10
    assert checkpoints.hash_at(1) is None
    assert CheckpointSet({}, 0, 0, 0).last_checkpoint_height is None


def test_seed_specs():
    assert SeedSpec.from_string("1.2.3.4", 23100) == SeedSpec("1.2.3.4", 23100)
    assert SeedSpec.from_string("1.2.3.4:9999", 23100).port == 9999
    assert SeedSpec.from_string("[2001:db8::1]:23200", 23100) == SeedSpec("2001:db8::1", 23200)
    assert SeedSpec.from_string("2001:db8::1", 23300).port == 23300
    assert str(SeedSpec("2001:db8::1", 23200)) == "[2001:db8::1]:23200"

    with pytest.raises(ValueError):
        SeedSpec.from_string("not-an-ip", 23100)
    with pytest.raises(ValueError):
        SeedSpec.from_string("1.2.3.4:0", 23100)


def test_pow_limit_literal(registry):
    assert registry.get("main").consensus.pow_limit == int.from_bytes(
        uint256_from_hex("00000fffff" + "0" * 54)[::-1], "big")
    assert target_to_bits(registry.get("test").consensus.pow_limit) == 0x1e0fffff


def test_genesis_is_read_only(registry):
    params = registry.get("main")

    with pytest.raises(AttributeError):
        params.genesis.nonce = 0
    with pytest.raises(AttributeError):
        params.genesis.txs[0].outputs[0].scriptpubkey = b''
    with pytest.raises(AttributeError):
        params.genesis.txs.append(params.genesis.txs[0])

    assert params.genesis.block_id == params.genesis_hash, "Shared genesis block was modified"
    assert registry.get("main").genesis is params.genesis


def test_parameter_sets_are_hashable(registry):
    sets = {registry.get(n) for n in NETWORKS}
    assert len(sets) == 3
    assert registry.get("test") in sets

    params = registry.get("main")
    assert hash(params) == hash(registry.get("main"))
    assert hash(params.checkpoints) == hash(replace(params.checkpoints))
    assert params.consensus == replace(params.consensus)
    assert hash(params.consensus) == hash(replace(params.consensus))
