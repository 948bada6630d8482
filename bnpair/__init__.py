"""BN254 field tower, curve groups G1 and G2, and the optimal ate pairing."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "fq", "fq2", "fq6", "fq12", "curve", "engine"]