# app/core/id_generator.py
import logging
import socket
import threading
from typing import Optional

logger = logging.getLogger(__name__)

FALLBACK_HOST_PREFIX = 42
COUNTER_MASK = 0xFFFFFFFF


def calculate_host_prefix() -> int:
    """
    Derive a 16-bit prefix from the local network address.

    Address bytes are accumulated big-endian and the low 16 bits are kept.
    Falls back to ``FALLBACK_HOST_PREFIX`` when the address cannot be resolved;
    every host on the fallback shares the same prefix.
    """
    try:
        address = socket.gethostbyname(socket.gethostname())
        packed = socket.inet_aton(address)
    except OSError:
        logger.warning(
            "Could not resolve local address, using fallback host prefix %d",
            FALLBACK_HOST_PREFIX,
        )
        return FALLBACK_HOST_PREFIX

    result = 0
    for b in packed:
        result = (result << 8) + (b & 0xFF)
    return result & 0xFFFF


class IdentifierGenerator:
    """
    Process-local id source: ``(host_prefix << 16) + counter``.

    Construct once per process and pass it to whatever needs ids. The
    counter is shared by all threads and advanced under a lock; it wraps
    silently at 32 bits.
    """

    def __init__(self, host_prefix: Optional[int] = None):
        if host_prefix is None:
            host_prefix = calculate_host_prefix()
        if not 0 <= host_prefix <= 0xFFFF:
            raise ValueError(f"host_prefix must fit in 16 bits, got {host_prefix}")
        self.host_prefix = host_prefix
        self._counter = 0
        self._lock = threading.Lock()

    def generate_id(self) -> int:
        with self._lock:
            self._counter = (self._counter + 1) & COUNTER_MASK
            value = self._counter
        return (self.host_prefix << 16) + value
