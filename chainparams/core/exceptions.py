"""
The custom exceptions used throughout chainparams
"""
__all__ = ["ReadError", "StreamError", "WriteError", "DataEncodingError", "TargetBitsError", "MerkleError",
           "ScriptError", "AddressError", "ChainParamsError", "GenesisError", "GenesisIntegrityError",
           "ParameterValidationError", "UnknownNetworkError", "NetworkNotSelectedError"]


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class WriteError(StreamError):
    """
    For when writing data that would be otherwise out of bounds
    """
    pass


class DataEncodingError(Exception):
    """
    For use in the hex, base58 and uint256 codecs
    """
    pass


class TargetBitsError(Exception):
    """
    For use in target bit encoding and decoding
    """
    pass


class MerkleError(Exception):
    """
    For use in the MerkleTree class
    """
    pass


class ScriptError(Exception):
    """
    For use in the Script builder
    """
    pass


class AddressError(DataEncodingError):
    """
    Raised when an address cannot be encoded or decoded under a network's prefix table
    """
    pass


# --- REGISTRY --- #

class ChainParamsError(Exception):
    """
    Parent class for the parameter registry errors
    """
    pass


class GenesisError(ChainParamsError):
    """
    The genesis builder received inputs outside its constraints
    """
    pass


class GenesisIntegrityError(ChainParamsError):
    """
    The computed genesis block does not match the network's hard-coded value.
    The registry must not come up when this is raised.
    """

    def __init__(self, network: str, field: str, expected: str, computed: str):
        self.network = network
        self.field = field
        self.expected = expected
        self.computed = computed
        super().__init__(f"{network}: computed {field} {computed} does not match expected {expected}")


class ParameterValidationError(ChainParamsError):
    """
    A network's literal table violates one of the parameter invariants
    """

    def __init__(self, network: str, reason: str):
        self.network = network
        self.reason = reason
        super().__init__(f"{network}: {reason}")


class UnknownNetworkError(ChainParamsError, ValueError):
    """
    Lookup or selection with an unrecognized network name
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown network {name!r}")


class NetworkNotSelectedError(ChainParamsError, RuntimeError):
    """
    Active parameters were requested before any network was selected
    """

    def __init__(self, message: str = "No network selected. Call select_network() first."):
        super().__init__(message)
