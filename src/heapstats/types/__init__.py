from heapstats.types.merge_cursor import MergeCursor
from heapstats.types.proof import PROOFS, Proof, find_proof

__all__ = ["PROOFS", "MergeCursor", "Proof", "find_proof"]
