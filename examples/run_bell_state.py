"""Example: Bell state statistics and a few other demo programs."""
from quantum_emulator import QuantumCircuit
from quantum_emulator.apps import QRNG, coin_flip, teleport_one

TRIALS = 1000

print("=" * 50)
print("quantum-emulator: Bell State Example")
print("=" * 50)

qc = QuantumCircuit(2)
qc.add_hadamard(0)
qc.add_cnot(0, 1)
counts = qc.run(TRIALS)

print("\nMeasurement Results:")
for state, count in sorted(counts.items()):
    print(f"  |{state}⟩: {count:4d} ({100*count/TRIALS:5.1f}%)")

print("\nExpected: ~50% |00⟩ and ~50% |11⟩ (entangled!)")

print(f"\nCoin flip: {coin_flip()}")

qrng = QRNG(num_qubits=4)
bits = qrng.random_bitstring(4)
print(f"4-bit random number: {bits} = {int(bits, 2)}")

result = teleport_one()
print(f"Teleportation: Alice measured {result.alice_bits}, Bob holds |{result.bob_bit}⟩")
