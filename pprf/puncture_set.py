"""
Puncture Bitset

Fixed-capacity, write-once-per-bit record of which PRF inputs have been
punctured. Bits are packed into a single Python int, bit i for input i.

The contents of this set are integrity-critical: the generator of a PRF
has already absorbed the prime of every punctured input, so a cleared
bit does not bring the original output back, it produces a spurious one.
"""


class PunctureSet:
    """Monotonic bit vector of punctured input indices."""

    __slots__ = ("_capacity", "_bits")

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._bits = 0

    def __len__(self) -> int:
        return self._capacity

    def __contains__(self, index: int) -> bool:
        return bool(self._bits >> index & 1) if 0 <= index < self._capacity else False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PunctureSet):
            return NotImplemented
        return self._capacity == other._capacity and self._bits == other._bits

    __hash__ = None

    def __repr__(self) -> str:
        return f"PunctureSet(capacity={self._capacity}, punctured={self.count()})"

    def add(self, index: int) -> bool:
        """
        Mark an index as punctured.

        Args:
            index: Input index in [0, capacity)

        Returns:
            bool: True if the bit was newly set, False if it was already set

        Raises:
            IndexError: If index is outside [0, capacity)
        """
        if not 0 <= index < self._capacity:
            raise IndexError(f"index {index} out of range for capacity {self._capacity}")
        mask = 1 << index
        if self._bits & mask:
            return False
        self._bits |= mask
        return True

    def count(self) -> int:
        """Number of set bits."""
        return bin(self._bits).count("1")

    def to_bytes(self) -> bytes:
        """
        Pack the bits little-endian: bit i lives in byte i // 8 at position i % 8.

        The output is always ceil(capacity / 8) bytes long.
        """
        return self._bits.to_bytes((self._capacity + 7) // 8, "little")

    @classmethod
    def from_bytes(cls, data: bytes, capacity: int) -> "PunctureSet":
        """
        Rebuild a set from its packed form.

        Args:
            data: Bytes produced by to_bytes()
            capacity: Logical length of the bit vector

        Raises:
            ValueError: If the byte length does not match the capacity or a
                bit beyond the capacity is set
        """
        puncture_set = cls(capacity)
        if len(data) != (capacity + 7) // 8:
            raise ValueError(
                f"expected {(capacity + 7) // 8} bytes for capacity {capacity}, got {len(data)}"
            )
        bits = int.from_bytes(data, "little")
        if bits >> capacity:
            raise ValueError("bits set beyond capacity")
        puncture_set._bits = bits
        return puncture_set
