from .inst import P256Ops, make_p256_group

__all__ = ["P256Ops", "make_p256_group"]
