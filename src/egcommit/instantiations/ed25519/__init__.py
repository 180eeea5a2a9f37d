from .inst import Ed25519Ops, make_ed25519_group

__all__ = ["Ed25519Ops", "make_ed25519_group"]
