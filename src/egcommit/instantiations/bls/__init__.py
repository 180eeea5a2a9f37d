from .inst import G1Ops, make_bls_group

__all__ = ["G1Ops", "make_bls_group"]
