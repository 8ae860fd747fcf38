"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.

QuantumRandom wraps the engine in the `random.Random` interface so it can
be handed to `generate()` as its random source.
"""
from __future__ import annotations

import random
from typing import List
from qiskit import QuantumCircuit
from qiskit_aer import AerSimulator
from qiskit import transpile

# Local simulators handle roughly this many qubits comfortably.
MAX_QUBITS = 29
RECIP_BPF = 2 ** -53


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, num_qubits: int = 20, shots: int = 16) -> None:
        if not 1 <= num_qubits <= MAX_QUBITS:
            raise ValueError(
                f"num_qubits={num_qubits} is outside the supported range "
                f"1..{MAX_QUBITS}."
            )
        if shots < 1:
            raise ValueError("shots must be at least 1.")

        self.num_qubits = num_qubits
        self.shots = shots
        # Local simulator backend.
        self.backend = AerSimulator()

        # Optional metadata storage for advanced inspection.
        self.last_raw_bits: list[int] | None = None
        self.last_measurement_basis: list[str] | None = None

        # The circuit never changes, so transpile it once.
        self.circuit, self.measurement_basis = self._build_circuit()
        self._compiled = transpile(self.circuit, self.backend)

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, …).
        """
        n = self.num_qubits
        # Track which basis each qubit will be measured in: "Z" or "X"
        measurement_basis: list[str] = []

        qc = QuantumCircuit(n, n)

        # 1) Put all qubits into superposition with H gate.
        for i in range(n):
            qc.h(i)

        # 2) Alternate measurement basis:
        #    - even index: measure in Z basis directly.
        #    - odd index: apply H again, measure in X basis.
        for i in range(n):
            if i % 2 == 1:
                measurement_basis.append("X")
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def get_raw_bits_with_meta(self) -> tuple[list[int], list[str], QuantumCircuit]:
        """
        Run the circuit `shots` times and return:
        - list of bits (0/1), num_qubits * shots long
        - list of measurement bases per qubit: "Z" or "X"
        - the (untranspiled) circuit
        """
        result = self.backend.run(self._compiled, shots=self.shots, memory=True).result()

        bits: list[int] = []
        for bitstring in result.get_memory():
            # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
            bits.extend(int(b) for b in bitstring[::-1])

        self.last_raw_bits = bits
        self.last_measurement_basis = self.measurement_basis

        return bits, self.measurement_basis, self.circuit

    def get_raw_bits(self) -> list[int]:
        bits, _basis, _circuit = self.get_raw_bits_with_meta()
        return bits


class QuantumRandom(random.Random):
    """
    Random number source fed by simulated qubit measurements.

    Only `random()` and `getrandbits()` are backed by the engine; every
    other method (randrange, choice, shuffle, ...) is inherited and derives
    from those two, the same way `random.SystemRandom` works.
    """

    def __init__(self, num_qubits: int = 20, shots: int = 16) -> None:
        self.engine = QuantumEngine(num_qubits, shots)
        self._buffer: List[int] = []
        super().__init__()

    def _take_bits(self, k: int) -> List[int]:
        while len(self._buffer) < k:
            self._buffer.extend(self.engine.get_raw_bits())
        taken, self._buffer = self._buffer[:k], self._buffer[k:]
        return taken

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        value = 0
        for bit in self._take_bits(k):
            value = (value << 1) | bit
        return value

    def random(self) -> float:
        return self.getrandbits(53) * RECIP_BPF

    def seed(self, *args, **kwds) -> None:
        "Stub method. Measurement outcomes cannot be seeded."
        return None

    def _notimplemented(self, *args, **kwds):
        raise NotImplementedError("Quantum entropy source does not have state.")

    getstate = setstate = _notimplemented
