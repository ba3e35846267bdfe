"""
Genesis block construction and verification.

Every network's first block is built from literal inputs: a coinbase transaction whose scriptSig carries
the marker 486604799, the extra nonce 4 and a newspaper headline, paying a fixed reward to a fixed script.
The computed hashes are then checked against the network's hard-coded values.
"""
from chainparams.block import Block
from chainparams.block.block import NULL_HASH
from chainparams.core import COIN, SCRIPT, GenesisError, GenesisIntegrityError, TargetBitsError
from chainparams.core.logging import get_logger
from chainparams.cryptography import HashType
from chainparams.data import bits_to_target, uint256_to_hex
from chainparams.script import Script
from chainparams.tx import Transaction, TxInput, TxOutput

logger = get_logger(__name__)

__all__ = ["GENESIS_MESSAGE", "GENESIS_PUBKEY", "create_genesis_block", "create_aeris_genesis_block",
           "verify_genesis"]

GENESIS_MESSAGE = b"New York Times 31/01/2018 President issues appeal for unity in state of union"
GENESIS_PUBKEY = bytes.fromhex(
    "042ca677fc77f936ac22a4bc7084ec941afc15eeb8a1af3dcf6fedc09b0a8462870c08c0a9c7112516f6393fc5b08d6527a2a6f80a8"
    "7d1d2373c9c5ad5512515f7"
)


def create_genesis_block(message: bytes, output_script: Script | bytes, time: int, nonce: int, bits: int,
                         version: int, reward: int, hash_type: HashType = HashType.X11) -> Block:
    """
    Assemble the one-transaction genesis block. Pure and deterministic: the same inputs always give the
    same block.

    Raises GenesisError if the message is empty or longer than a script element, or if bits do not
    encode a valid target.
    """
    if not message:
        raise GenesisError("Genesis message must not be empty")
    if len(message) > SCRIPT.MAX_SCRIPT_ELEMENT_SIZE:
        raise GenesisError(f"Genesis message exceeds {SCRIPT.MAX_SCRIPT_ELEMENT_SIZE} bytes")
    try:
        bits_to_target(bits)
    except TargetBitsError as e:
        raise GenesisError(f"Invalid genesis bits {bits:#010x}: {e}") from e

    scriptsig = Script().push_int(SCRIPT.GENESIS_MARKER).push_num(SCRIPT.GENESIS_EXTRA_NONCE).push_data(message)
    script_pubkey = output_script.to_bytes() if isinstance(output_script, Script) else output_script

    coinbase = Transaction(
        inputs=[TxInput.coinbase(scriptsig.to_bytes())],
        outputs=[TxOutput(reward, script_pubkey)],
        locktime=0,
        version=1
    )
    return Block(version=version, prev_block=NULL_HASH, timestamp=time, bits=bits, nonce=nonce, txs=[coinbase],
                 hash_type=hash_type)


def create_aeris_genesis_block(time: int, nonce: int, bits: int, version: int, reward: int) -> Block:
    """
    The genesis block shared by the Aeris networks: fixed headline, paid to the fixed genesis pubkey
    """
    return create_genesis_block(GENESIS_MESSAGE, Script.p2pk(GENESIS_PUBKEY), time, nonce, bits, version, reward,
                                HashType.X11)


def verify_genesis(network: str, genesis: Block, expected_hash: bytes, expected_merkle_root: bytes) -> bytes:
    """
    Check the built block against the network's literals and return its hash.
    Raises GenesisIntegrityError naming the network and the mismatched value.
    """
    block_hash = genesis.block_id
    logger.debug(f"{network} genesis hash {uint256_to_hex(block_hash)}")

    checks = (
        ("genesis hash", expected_hash, block_hash),
        ("merkle root", expected_merkle_root, genesis.merkle_root),
    )
    for field, expected, computed in checks:
        if computed != expected:
            logger.error(f"{network} {field} mismatch: expected {uint256_to_hex(expected)}, "
                         f"computed {uint256_to_hex(computed)}")
            raise GenesisIntegrityError(network, field, uint256_to_hex(expected), uint256_to_hex(computed))
    return block_hash


if __name__ == "__main__":
    aeris_genesis = create_aeris_genesis_block(1517849983, 2442161, 0x1e0ffff0, 1, 50 * COIN)
    print(f"AERIS GENESIS: {aeris_genesis.to_json()}")
