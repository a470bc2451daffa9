"""Kernel value-object types — public re-export surface.

Modules:
  base62.py — encode, decode, Base62Id
"""

from modrinth_client.kernel.types.base62 import Base62Id, decode, encode

__all__ = ["Base62Id", "decode", "encode"]
