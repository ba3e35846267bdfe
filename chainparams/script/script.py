"""
The Script builder.

Pushes follow Bitcoin Core's CScript operators:
    push_int(n)   -> OP_0, OP_1NEGATE, OP_1..OP_16, or a minimal script number push (CScript << int64)
    push_num(n)   -> always a script number push (CScript << CScriptNum(n))
    push_data(b)  -> direct push, OP_PUSHDATA1/2/4 as the length requires
"""
from chainparams.core import OPCODES, ScriptError

__all__ = ["Script", "encode_script_num"]


def encode_script_num(n: int) -> bytes:
    """
    Minimal little-endian sign-magnitude encoding of a script number
    """
    if n == 0:
        return b''

    magnitude = abs(n)
    encoded = bytearray()
    while magnitude:
        encoded.append(magnitude & 0xff)
        magnitude >>= 8

    # The top bit carries the sign: add a byte when the magnitude already uses it
    if encoded[-1] & 0x80:
        encoded.append(0x80 if n < 0 else 0x00)
    elif n < 0:
        encoded[-1] |= 0x80
    return bytes(encoded)


class Script:
    """
    Chainable script builder:

        Script().push_int(486604799).push_num(4).push_data(message)
    """
    OP_0 = 0x00
    OP_PUSHDATA1 = 0x4c
    OP_PUSHDATA2 = 0x4d
    OP_PUSHDATA4 = 0x4e
    OP_1NEGATE = 0x4f
    OP_1 = 0x51
    OP_RETURN = 0x6a
    OP_DUP = 0x76
    OP_EQUAL = 0x87
    OP_EQUALVERIFY = 0x88
    OP_HASH160 = 0xa9
    OP_CHECKSIG = 0xac

    __slots__ = ("_script",)

    def __init__(self, script: bytes = b''):
        self._script = bytearray(script)

    # --- PUSHES --- #

    def push_opcode(self, opcode: int) -> "Script":
        if not 0 <= opcode <= 0xff:
            raise ScriptError(f"Opcode {opcode} out of range")
        self._script.append(opcode)
        return self

    def push_int(self, n: int) -> "Script":
        if n == 0:
            return self.push_opcode(self.OP_0)
        if n == -1 or 1 <= n <= 16:
            return self.push_opcode(self.OP_1 + n - 1 if n > 0 else self.OP_1NEGATE)
        return self.push_data(encode_script_num(n))

    def push_num(self, n: int) -> "Script":
        return self.push_data(encode_script_num(n))

    def push_data(self, data: bytes) -> "Script":
        size = len(data)
        if size < self.OP_PUSHDATA1:
            self._script.append(size)
        elif size <= 0xff:
            self._script += bytes([self.OP_PUSHDATA1, size])
        elif size <= 0xffff:
            self._script += bytes([self.OP_PUSHDATA2]) + size.to_bytes(2, "little")
        elif size <= 0xffffffff:
            self._script += bytes([self.OP_PUSHDATA4]) + size.to_bytes(4, "little")
        else:
            raise ScriptError("Push data too large")
        self._script += data
        return self

    # --- STANDARD SCRIPTS --- #

    @classmethod
    def p2pk(cls, pubkey: bytes) -> "Script":
        """<pubkey> OP_CHECKSIG"""
        if len(pubkey) not in (33, 65):
            raise ScriptError(f"Public key must be 33 or 65 bytes; received {len(pubkey)}")
        return cls().push_data(pubkey).push_opcode(cls.OP_CHECKSIG)

    @classmethod
    def p2pkh(cls, pubkey_hash: bytes) -> "Script":
        """OP_DUP OP_HASH160 <pubkey_hash> OP_EQUALVERIFY OP_CHECKSIG"""
        if len(pubkey_hash) != 20:
            raise ScriptError("Public key hash must be 20 bytes")
        return (cls().push_opcode(cls.OP_DUP).push_opcode(cls.OP_HASH160).push_data(pubkey_hash)
                .push_opcode(cls.OP_EQUALVERIFY).push_opcode(cls.OP_CHECKSIG))

    # --- OUTPUT --- #

    def to_bytes(self) -> bytes:
        return bytes(self._script)

    def hex(self) -> str:
        return self._script.hex()

    @property
    def asm(self) -> str:
        """
        Human-readable opcodes; pushed data is shown as hex
        """
        parts = []
        script = self._script
        i = 0
        while i < len(script):
            opcode = script[i]
            i += 1
            if 0 < opcode < self.OP_PUSHDATA1 or opcode in (self.OP_PUSHDATA1, self.OP_PUSHDATA2, self.OP_PUSHDATA4):
                if opcode < self.OP_PUSHDATA1:
                    size = opcode
                else:
                    width = {self.OP_PUSHDATA1: 1, self.OP_PUSHDATA2: 2, self.OP_PUSHDATA4: 4}[opcode]
                    size = int.from_bytes(script[i:i + width], "little")
                    i += width
                data = script[i:i + size]
                if len(data) != size:
                    raise ScriptError("Push runs past the end of the script")
                parts.append(bytes(data).hex())
                i += size
            else:
                parts.append(OPCODES.get(opcode, f"OP_UNKNOWN_{opcode:#04x}"))
        return " ".join(parts)

    def __len__(self):
        return len(self._script)

    def __eq__(self, other):
        if isinstance(other, Script):
            return self._script == other._script
        if isinstance(other, (bytes, bytearray)):
            return bytes(self._script) == bytes(other)
        return NotImplemented

    def __hash__(self):
        return hash(bytes(self._script))

    def __repr__(self):
        return f"Script({self.asm!r})"
