"""Identifier generator: host prefix derivation and counter behaviour."""
import socket
import threading

import pytest

from app.core import id_generator
from app.core.id_generator import (
    FALLBACK_HOST_PREFIX,
    IdentifierGenerator,
    calculate_host_prefix,
)


class TestHostPrefix:

    def test_prefix_is_low_16_bits_of_address(self, monkeypatch):
        monkeypatch.setattr(socket, "gethostname", lambda: "worker-1")
        monkeypatch.setattr(socket, "gethostbyname", lambda name: "10.1.2.3")

        assert calculate_host_prefix() == (2 << 8) + 3

    def test_unresolvable_host_falls_back_to_constant(self, monkeypatch):
        def fail(name):
            raise socket.gaierror("no address")

        monkeypatch.setattr(socket, "gethostbyname", fail)

        assert calculate_host_prefix() == FALLBACK_HOST_PREFIX == 42

    def test_configured_prefix_skips_resolution(self, monkeypatch):
        def explode():
            raise AssertionError("address lookup should not happen")

        monkeypatch.setattr(id_generator, "calculate_host_prefix", explode)

        assert IdentifierGenerator(host_prefix=0x1234).host_prefix == 0x1234

    @pytest.mark.parametrize("prefix", [-1, 0x10000])
    def test_prefix_must_fit_in_16_bits(self, prefix):
        with pytest.raises(ValueError):
            IdentifierGenerator(host_prefix=prefix)


class TestGenerateId:

    def test_ids_carry_prefix_and_increasing_counter(self):
        generator = IdentifierGenerator(host_prefix=7)

        ids = [generator.generate_id() for _ in range(500)]

        assert len(set(ids)) == 500
        assert all(i >> 16 == 7 for i in ids)
        low_bits = [i & 0xFFFF for i in ids]
        assert low_bits == sorted(low_bits)
        assert low_bits[0] == 1

    def test_first_id(self):
        assert IdentifierGenerator(host_prefix=3).generate_id() == (3 << 16) + 1

    def test_counter_wraps_silently(self):
        generator = IdentifierGenerator(host_prefix=1)
        generator._counter = 0xFFFFFFFF

        assert generator.generate_id() == 1 << 16

    def test_concurrent_callers_never_share_an_id(self):
        generator = IdentifierGenerator(host_prefix=9)
        results = []
        lock = threading.Lock()

        def worker():
            local = [generator.generate_id() for _ in range(1000)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8000
        assert len(set(results)) == 8000
