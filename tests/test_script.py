"""
Tests for the Script builder
"""
import pytest

from chainparams.core import ScriptError
from chainparams.script import Script, encode_script_num


@pytest.mark.parametrize("n, expected", [
    (0, ""),
    (1, "01"),
    (4, "04"),
    (127, "7f"),
    (128, "8000"),
    (255, "ff00"),
    (256, "0001"),
    (-1, "81"),
    (-128, "8080"),
    (486604799, "ffff001d"),
])
def test_script_num(n, expected):
    assert encode_script_num(n).hex() == expected, f"Script number encoding failed for {n}"


def test_push_int():
    assert Script().push_int(0).to_bytes() == b'\x00', "0 must push OP_0"
    assert Script().push_int(-1).to_bytes() == b'\x4f', "-1 must push OP_1NEGATE"
    assert Script().push_int(1).to_bytes() == b'\x51'
    assert Script().push_int(16).to_bytes() == b'\x60'
    assert Script().push_int(17).hex() == "0111"
    assert Script().push_int(486604799).hex() == "04ffff001d"


def test_push_num():
    # A script number is always pushed as data, even where push_int would use a small-int opcode
    assert Script().push_num(4).hex() == "0104"
    assert Script().push_num(0).hex() == "00"


def test_push_data():
    assert Script().push_data(b'\xaa' * 75).hex() == "4b" + "aa" * 75
    assert Script().push_data(b'\xaa' * 77).hex()[:4] == "4c4d", "77-byte push must use OP_PUSHDATA1"
    assert Script().push_data(b'\xaa' * 256).hex()[:6] == "4d0001", "256-byte push must use OP_PUSHDATA2"
    assert Script().push_data(b'\xaa' * 0x10000).hex()[:10] == "4e00000100", "Push must use OP_PUSHDATA4"


def test_standard_scripts():
    pubkey = bytes.fromhex("02" + "ab" * 32)
    p2pk = Script.p2pk(pubkey)
    assert p2pk.hex() == "21" + pubkey.hex() + "ac"
    assert p2pk.asm == f"{pubkey.hex()} OP_CHECKSIG"

    p2pkh = Script.p2pkh(b'\x11' * 20)
    assert p2pkh.asm == f"OP_DUP OP_HASH160 {'11' * 20} OP_EQUALVERIFY OP_CHECKSIG"
    assert len(p2pkh) == 25

    with pytest.raises(ScriptError):
        Script.p2pk(b'\x02' * 20)
    with pytest.raises(ScriptError):
        Script.p2pkh(b'\x11' * 19)


def test_script_equality():
    script = Script().push_int(5).push_data(b'\x01\x02')
    assert script == Script(script.to_bytes())
    assert script == script.to_bytes()
    assert hash(script) == hash(Script(script.to_bytes()))
    assert Script().push_int(5).asm == "OP_5"
