"""
The MerkleTree class
"""
from chainparams.core import DATA, MerkleError
from chainparams.cryptography import hash256

__all__ = ["MerkleTree", "merkle_root"]


class MerkleTree:
    """
    Merkle tree over a list of ids (txids in internal byte order). Levels are stored leaves first; the
    last level holds the single root. Odd levels duplicate their final element before pairing.

    `mutated` is set when some level pairs two identical adjacent hashes: such a list yields the same root
    as a shorter list, so a block with a mutated tree must not be accepted as the block that root commits to.
    """
    __slots__ = ("levels", "mutated")

    def __init__(self, id_list: list[bytes]):
        if not id_list:
            raise MerkleError("ID list cannot be empty. A Merkle tree requires at least one transaction ID.")
        if any(len(i) != DATA.HASH for i in id_list):
            raise MerkleError("Every ID in a Merkle tree must be 32 bytes")

        self.mutated = False
        self.levels = [list(id_list)]
        while len(self.levels[-1]) > 1:
            self.levels.append(self._next_level(self.levels[-1]))
        self.levels = tuple(tuple(level) for level in self.levels)

    def _next_level(self, level: list[bytes]) -> list[bytes]:
        upper = []
        for i in range(0, len(level), 2):
            left = level[i]
            right = level[i + 1] if i + 1 < len(level) else left
            if i + 1 < len(level) and left == right:
                self.mutated = True
            upper.append(hash256(left + right))
        return upper

    @property
    def merkle_root(self) -> bytes:
        return self.levels[-1][0]

    @property
    def height(self) -> int:
        return len(self.levels) - 1


def merkle_root(id_list: list[bytes]) -> bytes:
    """For a single id the root is the id itself"""
    return MerkleTree(id_list).merkle_root
