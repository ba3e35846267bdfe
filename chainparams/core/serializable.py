"""
The Abstract Base Class for all serializable elements in chainparams
"""
import json
from abc import ABC, abstractmethod
from io import BytesIO

__all__ = ["Serializable"]


class Serializable(ABC):
    """
    A base class that defines serialization and deserialization interfaces
    for the protocol objects a genesis block is assembled from. Instances are read-only once built.
    """

    @classmethod
    @abstractmethod
    def from_bytes(cls, byte_stream: bytes | BytesIO):
        """
        Deserialize an instance from its byte representation.
        """
        raise NotImplementedError(f"{cls.__name__} must implement from_bytes()")

    @classmethod
    def from_hex(cls, hex_string: str):
        return cls.from_bytes(bytes.fromhex(hex_string))

    @property
    def length(self) -> int:
        """Return the length in bytes of the serialized form."""
        return len(self.to_bytes())

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Serialize the object to bytes according to the wire format."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_bytes()")

    def hex(self) -> str:
        return self.to_bytes().hex()

    @abstractmethod
    def to_dict(self) -> dict:
        """Return a dictionary representation of the object."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_dict()")

    def to_json(self) -> str:
        """Return a pretty-printed JSON string of the object."""
        return json.dumps(self.to_dict(), indent=2)

    # --- IMMUTABILITY --- #

    def _freeze(self) -> None:
        """Called at the end of __init__; later writes raise AttributeError"""
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is read-only; cannot set {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is read-only; cannot delete {name!r}")
        super().__delattr__(name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Serializable):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{self.__class__.__name__}({attrs})"
